"""
CaptureDesk Server - Admin Settings Endpoints
"""

import logging
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from admin_sessions import ValidateCsrfToken, CSRF_FIELD_NAME
from managers.setting_store import SettingStore, AlertStore
from models.api import AlertChannelResponse, SettingsSnapshotResponse
from routes.admin.auth import RequireAdminSession
from settings_catalog import ALERT_METHODS, GLOBAL_GROUP
from settings_pipeline import RunSettingsUpdate
from settings_view import BuildSettingsContext

# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()

# Get the directory where server.py is located
script_dir = Path(__file__).parent.parent.parent

# Initialize Jinja2 templates
templates = Jinja2Templates(directory=str(script_dir / "templates"))

CSRF_INVALID_MESSAGE = "Invalid CSRF token."


def GetStores():
    """Build the setting and alert stores on the shared database manager"""
    from database import db_manager
    return SettingStore(db_manager), AlertStore(db_manager)


def RenderSettingsPage(request: Request, session: dict, message: Optional[str] = None):
    """Render the settings page with the current stored values"""
    setting_store, alert_store = GetStores()

    context = BuildSettingsContext(setting_store, alert_store)
    context.update({
        "show_nav": True,
        "active_page": "settings",
        "username": session["username"],
        "csrf_token": session["csrf_token"],
        "message": message,
        "theme": setting_store.Get("theme"),
    })
    return templates.TemplateResponse(request, "settings.html", context)


# ==================== Admin Settings Management ====================


@router.get("/admin/settings", response_class=HTMLResponse, tags=["Admin"])
async def admin_settings_page(
    request: Request,
    session: dict = Depends(RequireAdminSession)
):
    """
    Display settings management page
    """
    return RenderSettingsPage(request, session)


@router.post("/admin/settings", response_class=HTMLResponse, tags=["Admin"])
async def admin_update_settings(
    request: Request,
    session: dict = Depends(RequireAdminSession)
):
    """
    Apply a settings form submission

    Runs every section present in the form. The first rejected section stops
    processing and its reason is shown on the page. When the killswitch runs
    the "system disabled" page is shown instead.

    Args:
        request: FastAPI request object
        session: Admin session from dependency

    Returns:
        Settings page, or the disabled page after the killswitch
    """
    form = await request.form()

    if not ValidateCsrfToken(session["session_id"], form.get(CSRF_FIELD_NAME)):
        logger.warning(f"Rejected settings update from '{session['username']}': invalid CSRF token")
        return RenderSettingsPage(request, session, CSRF_INVALID_MESSAGE)

    setting_store, alert_store = GetStores()
    outcome = RunSettingsUpdate(form, setting_store, alert_store, username=session["username"])

    if outcome.Killed:
        return templates.TemplateResponse(
            request,
            "killed.html",
            {"show_nav": False, "message": outcome.killswitch_message}
        )

    return RenderSettingsPage(request, session, outcome.message)


@router.get("/admin/api/settings", tags=["Admin"])
async def admin_get_settings(
    session: dict = Depends(RequireAdminSession)
) -> SettingsSnapshotResponse:
    """
    Get current settings and global alert channels

    Returns:
        SettingsSnapshotResponse
    """
    try:
        setting_store, alert_store = GetStores()
        settings = setting_store.GetAll()
        alerts = [
            AlertChannelResponse(
                method_id=alert.method_id,
                channel=ALERT_METHODS.get(alert.method_id, str(alert.method_id)),
                enabled=bool(alert.enabled),
                value1=alert.value1 or "",
                value2=alert.value2 or ""
            )
            for alert in alert_store.GetGroup(GLOBAL_GROUP)
        ]
        return SettingsSnapshotResponse(
            settings=settings,
            alerts=alerts,
            killed=bool(settings.get("killswitch"))
        )
    except Exception as e:
        logger.error(f"Error fetching settings: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch settings")
