"""
CaptureDesk Server - Setting Database Model

Setting model for storing the operational configuration as key-value pairs.
"""

from sqlalchemy import Column, String, Text

from models.database.base import Base


class Setting(Base):
    """
    Settings table - stores configuration as key-value pairs
    Values are always strings; booleans are stored as "1" / "0"
    """
    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False, default="")
