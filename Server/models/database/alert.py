"""
CaptureDesk Server - Alert Database Model

Alert model for storing alert channel configuration per group.
"""

from sqlalchemy import Column, Integer, String, Boolean

from models.database.base import Base


class Alert(Base):
    """
    Alerts table - one row per (group, alert method)

    group_id 0 is the global group. method_id is one of:
    1 = mail, 2 = telegram, 3 = slack, 4 = discord
    """
    __tablename__ = "alerts"

    group_id = Column(Integer, primary_key=True)
    method_id = Column(Integer, primary_key=True)
    enabled = Column(Boolean, nullable=False, default=False)
    value1 = Column(String, nullable=False, default="")  # Email, bot token or webhook URL
    value2 = Column(String, nullable=False, default="")  # Telegram chat id only
