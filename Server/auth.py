"""
CaptureDesk Server - Authentication Utilities

Credential checks for the admin web interface. Passwords are stored as
bcrypt hashes (see DatabaseManager.HashPassword).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from models.database import User

logger = logging.getLogger(__name__)


def AuthenticateUser(db_manager, username: str, password: str) -> Optional[dict]:
    """
    Authenticate a user by username and password

    Args:
        db_manager: DatabaseManager instance
        username: Username to check
        password: Plain text password

    Returns:
        dict with user_id, username and is_admin if the credentials are valid
        and the account is active, None otherwise
    """
    session = db_manager.GetSession()
    try:
        user = session.query(User).filter(User.username == username).first()
        if not user or not user.is_active:
            logger.info(f"Failed login attempt for user '{username}'")
            return None

        if not db_manager.VerifyPassword(password, user.password_hash):
            logger.info(f"Failed login attempt for user '{username}'")
            return None

        user.last_login = datetime.now(timezone.utc)
        session.commit()

        return {
            "user_id": user.user_id,
            "username": user.username,
            "is_admin": bool(user.is_admin)
        }
    finally:
        session.close()
