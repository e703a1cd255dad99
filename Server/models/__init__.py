"""
CaptureDesk Server - Models Package

This package contains all data models for the CaptureDesk server:
- database: SQLAlchemy database models
- api: API endpoint Pydantic models
- infrastructure: Dataclass models for sessions and the settings pipeline
"""

# Re-export all models for convenient importing
from models.database import *
from models.api import *
from models.infrastructure import *
