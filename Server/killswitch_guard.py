"""
CaptureDesk Server - Killswitch Guard

HTTP middleware that stops normal operation while the killswitch setting is
set. Only the health check keeps answering. The switch is cleared manually
with reset_killswitch.py.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from managers.setting_store import SettingStore

logger = logging.getLogger(__name__)

ALWAYS_ALLOWED_PATHS = {"/health"}
DISABLED_MESSAGE = "This page does not exist."


def IsKilled(db_manager) -> bool:
    """
    Check whether the killswitch is set

    Args:
        db_manager: DatabaseManager instance (None before startup)
    """
    if db_manager is None:
        return False
    return bool(SettingStore(db_manager).Get("killswitch"))


async def KillswitchGuard(request: Request, call_next):
    """Answer 404 to everything but the health check while killed"""
    import database

    if request.url.path not in ALWAYS_ALLOWED_PATHS and IsKilled(database.db_manager):
        logger.debug(f"Killswitch set, refusing {request.method} {request.url.path}")
        return PlainTextResponse(DISABLED_MESSAGE, status_code=404)

    return await call_next(request)
