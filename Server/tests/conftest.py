"""
Shared fixtures for CaptureDesk Server tests
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from managers.database_manager import DatabaseManager
from managers.setting_store import SettingStore, AlertStore


@pytest.fixture
def db_manager(tmp_path):
    """Initialized database in a temporary directory"""
    manager = DatabaseManager(str(tmp_path / "database" / "test.db"))
    manager.InitializeDatabase()
    return manager


@pytest.fixture
def setting_store(db_manager):
    return SettingStore(db_manager)


@pytest.fixture
def alert_store(db_manager):
    return AlertStore(db_manager)


@pytest.fixture
def themes_dir(tmp_path):
    """Themes directory with 'classic' and 'dark' installed"""
    directory = tmp_path / "css"
    directory.mkdir()
    (directory / "classic.css").write_text("body {}")
    (directory / "dark.css").write_text("body {}")
    return directory
