"""
CaptureDesk Server - Managers Package

This package contains manager classes for the database and the settings stores.
"""

from managers.database_manager import DatabaseManager
from managers.setting_store import SettingStore, AlertStore

__all__ = ['DatabaseManager', 'SettingStore', 'AlertStore']
