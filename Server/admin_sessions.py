"""
CaptureDesk Server - Admin Session Management

Simple cookie-based session management for the admin web interface.
Sessions are stored in memory only and each carries its own CSRF token.
"""

import secrets
import logging
from datetime import datetime, timezone, timedelta
from typing import Optional, Dict

from models.infrastructure import AdminSession

logger = logging.getLogger(__name__)

# In-memory session storage
_sessions: Dict[str, AdminSession] = {}

# Session configuration
SESSION_COOKIE_NAME = "admin_session"
SESSION_LIFETIME_HOURS = 24
CSRF_FIELD_NAME = "csrf_token"


def CreateSession(user_id: int, username: str) -> AdminSession:
    """
    Create a new admin session

    Args:
        user_id: User ID
        username: Username

    Returns:
        AdminSession object with new session ID and CSRF token
    """
    now = datetime.now(timezone.utc)
    session = AdminSession(
        session_id=secrets.token_urlsafe(32),
        user_id=user_id,
        username=username,
        csrf_token=secrets.token_urlsafe(32),
        created_at_utc=now,
        expires_at_utc=now + timedelta(hours=SESSION_LIFETIME_HOURS)
    )

    _sessions[session.session_id] = session

    logger.info(f"Created admin session for user '{username}' (expires in {SESSION_LIFETIME_HOURS} hours)")

    return session


def GetSession(session_id: str) -> Optional[AdminSession]:
    """
    Get an active session by ID

    Args:
        session_id: Session ID from cookie

    Returns:
        AdminSession if valid and not expired, None otherwise
    """
    if not session_id:
        return None

    session = _sessions.get(session_id)
    if not session:
        return None

    if session.IsExpired():
        logger.info(f"Session expired for user '{session.username}'")
        del _sessions[session_id]
        return None

    return session


def DeleteSession(session_id: str) -> None:
    """
    Delete a session (logout)

    Args:
        session_id: Session ID to delete
    """
    session = _sessions.pop(session_id, None)
    if session:
        logger.info(f"Deleted admin session for user '{session.username}'")


def CleanupExpiredSessions() -> int:
    """
    Remove all expired sessions from memory

    Returns:
        Number of sessions cleaned up
    """
    expired_ids = [
        session_id
        for session_id, session in _sessions.items()
        if session.IsExpired()
    ]

    for session_id in expired_ids:
        del _sessions[session_id]

    if expired_ids:
        logger.info(f"Cleaned up {len(expired_ids)} expired admin sessions")

    return len(expired_ids)


def ValidateCsrfToken(session_id: str, token: Optional[str]) -> bool:
    """
    Check a submitted CSRF token against the session's token

    Args:
        session_id: Session ID from cookie
        token: Token submitted with the form

    Returns:
        bool: True if the session exists and the token matches
    """
    session = GetSession(session_id)
    if not session or not token:
        return False
    return secrets.compare_digest(session.csrf_token, token)
