"""
CaptureDesk Server - Database Base

Shared declarative base for all SQLAlchemy models.
"""

from sqlalchemy.orm import declarative_base

# Create the shared declarative base
Base = declarative_base()
