"""
CaptureDesk Server - Setting and Alert Stores

Durable key/value access to the settings table and the alerts table.
Every Set call is committed on its own, so a single write is atomic but a
sequence of writes is not.
"""

import logging
from typing import Dict, List, Optional

from models.database import Setting, Alert

logger = logging.getLogger(__name__)

ALERT_FIELDS = ("enabled", "value1", "value2")


class SettingStore:
    """
    String key -> string value store backed by the settings table
    """

    def __init__(self, db_manager):
        """
        Args:
            db_manager: DatabaseManager instance
        """
        self.db_manager = db_manager

    def Get(self, key: str) -> str:
        """
        Get a setting value

        Returns:
            str: Stored value, or an empty string if the key has never been set
        """
        session = self.db_manager.GetSession()
        try:
            setting = session.query(Setting).filter(Setting.key == key).first()
            return setting.value if setting and setting.value is not None else ""
        finally:
            session.close()

    def Set(self, key: str, value: Optional[str]) -> None:
        """
        Create or update a setting and commit immediately

        Args:
            key: Setting key
            value: New value; None is stored as an empty string
        """
        value = "" if value is None else str(value)
        session = self.db_manager.GetSession()
        try:
            setting = session.query(Setting).filter(Setting.key == key).first()
            if setting:
                setting.value = value
            else:
                session.add(Setting(key=key, value=value))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def GetBool(self, key: str) -> bool:
        """Read a "1" / "0" encoded setting as a bool"""
        return self.Get(key) == "1"

    def SetBool(self, key: str, enabled: bool) -> None:
        """Store a bool as "1" / "0" """
        self.Set(key, "1" if enabled else "0")

    def GetAll(self) -> Dict[str, str]:
        """
        Get every stored setting

        Returns:
            dict: key -> value
        """
        session = self.db_manager.GetSession()
        try:
            return {s.key: s.value or "" for s in session.query(Setting).order_by(Setting.key).all()}
        finally:
            session.close()


class AlertStore:
    """
    Alert channel store keyed by (group, method) backed by the alerts table
    """

    def __init__(self, db_manager):
        """
        Args:
            db_manager: DatabaseManager instance
        """
        self.db_manager = db_manager

    def Get(self, group_id: int, method_id: int, field: str):
        """
        Get one field of an alert channel

        Args:
            group_id: Alert group (0 = global)
            method_id: Alert method id
            field: 'enabled', 'value1' or 'value2'

        Returns:
            bool for 'enabled', str otherwise; False / "" when the row is missing
        """
        if field not in ALERT_FIELDS:
            raise ValueError(f"Unknown alert field: {field}")

        session = self.db_manager.GetSession()
        try:
            alert = session.query(Alert).filter(
                Alert.group_id == group_id,
                Alert.method_id == method_id
            ).first()
            if not alert:
                return False if field == "enabled" else ""
            value = getattr(alert, field)
            if field == "enabled":
                return bool(value)
            return value or ""
        finally:
            session.close()

    def Set(self, group_id: int, method_id: int, enabled: bool, value1: Optional[str], value2: Optional[str] = "") -> None:
        """
        Create or update an alert channel and commit immediately

        Args:
            group_id: Alert group (0 = global)
            method_id: Alert method id
            enabled: Whether the channel is switched on
            value1: Email address, bot token or webhook URL
            value2: Telegram chat id (empty for other methods)
        """
        value1 = value1 or ""
        value2 = value2 or ""
        session = self.db_manager.GetSession()
        try:
            alert = session.query(Alert).filter(
                Alert.group_id == group_id,
                Alert.method_id == method_id
            ).first()
            if alert:
                alert.enabled = bool(enabled)
                alert.value1 = value1
                alert.value2 = value2
            else:
                session.add(Alert(group_id=group_id, method_id=method_id, enabled=bool(enabled), value1=value1, value2=value2))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def GetGroup(self, group_id: int) -> List[Alert]:
        """
        Get all alert channels of a group ordered by method id

        Returns:
            list: Alert rows (detached from their session)
        """
        session = self.db_manager.GetSession()
        try:
            return session.query(Alert).filter(Alert.group_id == group_id).order_by(Alert.method_id).all()
        finally:
            session.close()
