"""
CaptureDesk Server - Database Manager

This module manages database connection, initialization, and the password
helpers used by admin authentication.
"""

import logging
import secrets
import string
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import bcrypt

from models.database import Base, User, Setting, Alert
from settings_catalog import DEFAULT_SETTINGS, ALERT_METHODS, GLOBAL_GROUP

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "database/capturedesk.db"


class DatabaseManager:
    """
    Manages database connection, initialization, and operations
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

        # Ensure database directory exists
        db_dir = Path(db_path).parent
        if db_dir and str(db_dir) != '.':
            db_dir.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def InitializeDatabase(self) -> Optional[str]:
        """
        Initialize the database with all tables and default data
        Creates tables if they don't exist, populates default settings and
        global alert rows, and creates a default admin user on first run.

        Returns:
            str: Generated admin password if admin user was created, None otherwise
        """
        # Create all tables
        Base.metadata.create_all(bind=self.engine)

        session = self.SessionLocal()
        admin_password = None

        try:
            # Check if this is first run (no users exist)
            is_first_run = session.query(User).count() == 0

            if is_first_run:
                admin_password = self.GenerateRandomPassword()
                admin_user = User(
                    username="admin",
                    password_hash=self.HashPassword(admin_password),
                    is_admin=True,
                    created_at=datetime.now(timezone.utc),
                    is_active=True
                )
                session.add(admin_user)
                logger.info("Created default admin user 'admin'")

            self.PopulateDefaultSettings(session)
            self.PopulateDefaultAlerts(session)

            session.commit()

        except Exception as e:
            session.rollback()
            raise e
        finally:
            session.close()

        return admin_password

    def PopulateDefaultSettings(self, session):
        """
        Populate default settings
        Only adds settings that don't already exist

        Args:
            session: SQLAlchemy session
        """
        for key, value in DEFAULT_SETTINGS.items():
            existing = session.query(Setting).filter(Setting.key == key).first()
            if not existing:
                session.add(Setting(key=key, value=value))
                logger.info(f"Added default setting: {key} = {value!r}")

    def PopulateDefaultAlerts(self, session):
        """
        Create the global alert row for every alert method
        Existing rows are left untouched

        Args:
            session: SQLAlchemy session
        """
        for method_id, channel in ALERT_METHODS.items():
            existing = session.query(Alert).filter(
                Alert.group_id == GLOBAL_GROUP,
                Alert.method_id == method_id
            ).first()
            if not existing:
                session.add(Alert(group_id=GLOBAL_GROUP, method_id=method_id, enabled=False, value1="", value2=""))
                logger.info(f"Added global alert channel: {channel}")

    @staticmethod
    def GenerateRandomPassword(length: int = 12) -> str:
        """
        Generate a secure random password

        Args:
            length: Password length (default 12)

        Returns:
            str: Generated password
        """
        alphabet = string.ascii_letters + string.digits + "!@#$%^&*"
        return ''.join(secrets.choice(alphabet) for _ in range(length))

    @staticmethod
    def HashPassword(password: str) -> str:
        """
        Hash a password using bcrypt
        Truncates to 72 bytes to comply with bcrypt's maximum password length

        Args:
            password: Plain text password

        Returns:
            str: Hashed password (as string)
        """
        password_bytes = password.encode('utf-8')[:72]
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt())
        return hashed.decode('utf-8')

    @staticmethod
    def VerifyPassword(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a bcrypt hash

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored password hash (as string)

        Returns:
            bool: True if password matches, False otherwise
        """
        password_bytes = plain_password.encode('utf-8')[:72]
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))

    def CreateUser(self, username: str, password: str, is_admin: bool = False) -> User:
        """
        Create a user account

        Args:
            username: Unique username
            password: Plain text password (stored as bcrypt hash)
            is_admin: Whether the user may manage settings

        Returns:
            User: The created user
        """
        session = self.SessionLocal()
        try:
            user = User(
                username=username,
                password_hash=self.HashPassword(password),
                is_admin=is_admin,
                created_at=datetime.now(timezone.utc),
                is_active=True
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            return user
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def GetSession(self):
        """
        Get a new database session

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()
