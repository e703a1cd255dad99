"""
CaptureDesk Server - Admin Authentication Endpoints

This module contains admin web interface authentication endpoints including
login, logout and the session dependencies used by the other admin routes.
"""

import logging
from typing import Optional
from pathlib import Path
from fastapi import APIRouter, HTTPException, status, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from models.database import User
from auth import AuthenticateUser
from admin_sessions import (
    CreateSession, GetSession, DeleteSession,
    SESSION_COOKIE_NAME, SESSION_LIFETIME_HOURS
)


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()

# Get the directory where server.py is located
script_dir = Path(__file__).parent.parent.parent

# Initialize Jinja2 templates
templates = Jinja2Templates(directory=str(script_dir / "templates"))


# ==================== Helper Functions ====================

def GetAdminSession(request: Request) -> Optional[dict]:
    """
    Get admin session from cookie
    Returns session info or None if not logged in
    """
    session_id = request.cookies.get(SESSION_COOKIE_NAME)
    if not session_id:
        return None

    session = GetSession(session_id)
    if not session:
        return None

    return {
        "session_id": session.session_id,
        "user_id": session.user_id,
        "username": session.username,
        "csrf_token": session.csrf_token
    }


def RequireAdminSession(request: Request) -> dict:
    """
    Dependency to require a logged-in session of an admin user
    Redirects anonymous visitors to the login page
    """
    from database import db_manager

    session = GetAdminSession(request)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Not authenticated",
            headers={"Location": "/admin/login"}
        )

    db_session = db_manager.GetSession()
    try:
        user = db_session.query(User).filter(User.user_id == session['user_id']).first()
        if not user or not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found"
            )

        if not user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin permission required"
            )

        return session

    finally:
        db_session.close()


# ==================== Admin Authentication Endpoints ====================

@router.get("/admin", response_class=RedirectResponse, tags=["Admin"])
async def admin_root(request: Request):
    """Redirect /admin to the settings page or the login page"""
    if not GetAdminSession(request):
        return RedirectResponse(url="/admin/login", status_code=303)
    return RedirectResponse(url="/admin/settings", status_code=303)


@router.get("/admin/login", response_class=HTMLResponse, tags=["Admin"])
async def admin_login_page(request: Request):
    """
    Display admin login page

    Returns:
        HTML login form
    """
    if GetAdminSession(request):
        return RedirectResponse(url="/admin/settings", status_code=303)

    return templates.TemplateResponse(
        request,
        "login.html",
        {"show_nav": False, "error": None}
    )


@router.post("/admin/login", response_class=HTMLResponse, tags=["Admin"])
async def admin_login_submit(
    request: Request,
    username: str = Form(...),
    password: str = Form(...)
):
    """
    Process admin login form submission

    Args:
        username: Username from form
        password: Password from form

    Returns:
        Redirect to the settings page on success, login form with error on failure
    """
    from database import db_manager

    user = AuthenticateUser(db_manager, username, password)

    if not user:
        return templates.TemplateResponse(
            request,
            "login.html",
            {"show_nav": False, "error": "Invalid username or password"}
        )

    session = CreateSession(user['user_id'], user['username'])

    response = RedirectResponse(url="/admin/settings", status_code=303)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session.session_id,
        max_age=SESSION_LIFETIME_HOURS * 3600,
        httponly=True,
        samesite="lax"
    )

    return response


@router.post("/admin/logout", tags=["Admin"])
@router.get("/admin/logout", tags=["Admin"])
async def admin_logout(request: Request):
    """
    Logout endpoint - clears session and redirects to login page
    Supports both GET and POST methods
    """
    session = GetAdminSession(request)
    if session:
        DeleteSession(session['session_id'])

    response = RedirectResponse(url="/admin/login", status_code=303)
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        samesite="lax"
    )

    return response
