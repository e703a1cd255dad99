"""
CaptureDesk Server - Infrastructure Models Package

This package contains dataclass models for infrastructure components
like sessions and the settings update pipeline.
"""

from models.infrastructure.admin_session import AdminSession
from models.infrastructure.validation_result import ValidationResult
from models.infrastructure.settings_update_outcome import SettingsUpdateOutcome

__all__ = [
    'AdminSession',
    'ValidationResult',
    'SettingsUpdateOutcome',
]
