"""
CaptureDesk Server - Installed Themes

Themes are the CSS files in assets/css; the file stem is the theme name.
"""

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Directory holding one <theme>.css per installed theme
THEMES_DIR = Path(__file__).parent / "assets" / "css"


def ListInstalledThemes(themes_dir: Optional[Path] = None) -> List[str]:
    """
    List installed theme names

    Args:
        themes_dir: Directory to scan (defaults to THEMES_DIR)

    Returns:
        Sorted list of theme names
    """
    themes_dir = Path(themes_dir) if themes_dir else THEMES_DIR
    if not themes_dir.is_dir():
        logger.warning(f"Themes directory not found: {themes_dir}")
        return []
    return sorted(p.stem for p in themes_dir.glob("*.css") if p.is_file())


def ThemeIsInstalled(name: str, themes_dir: Optional[Path] = None) -> bool:
    """
    Check whether a theme name has a matching CSS file

    Args:
        name: Sanitized theme name (alphanumeric only)
        themes_dir: Directory to look in (defaults to THEMES_DIR)
    """
    if not name:
        return False
    themes_dir = Path(themes_dir) if themes_dir else THEMES_DIR
    return (themes_dir / f"{name}.css").is_file()
