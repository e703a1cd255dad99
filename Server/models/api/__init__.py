"""
CaptureDesk Server - API Models Package

This package contains Pydantic models for the JSON API endpoints.
"""

from models.api.settings import AlertChannelResponse, SettingsSnapshotResponse

__all__ = [
    'AlertChannelResponse',
    'SettingsSnapshotResponse',
]
