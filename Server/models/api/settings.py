"""
CaptureDesk Server - Settings API Models

Pydantic models for the settings JSON endpoint.
"""

from typing import Dict, List

from pydantic import BaseModel


class AlertChannelResponse(BaseModel):
    """State of one global alert channel"""
    method_id: int
    channel: str  # 'mail', 'telegram', 'slack' or 'discord'
    enabled: bool
    value1: str
    value2: str


class SettingsSnapshotResponse(BaseModel):
    """All settings and global alert channels"""
    settings: Dict[str, str]
    alerts: List[AlertChannelResponse]
    killed: bool
