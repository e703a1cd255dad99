"""
CaptureDesk Server - Main FastAPI Application

This module contains the main FastAPI application for the CaptureDesk server.
It serves the admin web interface used to manage the operational settings.
"""

import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
import uvicorn

from managers.database_manager import DatabaseManager
from admin_sessions import CleanupExpiredSessions
from killswitch_guard import KillswitchGuard
from themes import THEMES_DIR

# Configure logging to write to both console and file
logs_dir = Path("logs")
logs_dir.mkdir(exist_ok=True)

# Create log filename with timestamp
log_filename = logs_dir / f"capturedesk-server-{datetime.now().strftime('%Y-%m-%d')}.log"

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        # Console handler
        logging.StreamHandler(),
        # File handler with rotation (max 10MB per file, keep 10 backup files)
        RotatingFileHandler(
            log_filename,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=10,
            encoding='utf-8'
        )
    ]
)
logger = logging.getLogger(__name__)

# Import database module for shared db_manager instance
import database


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    Manages database initialization and cleanup
    """
    logger.info("CaptureDesk Server starting up...")

    database.db_manager = DatabaseManager()

    # Creates tables and missing defaults; only creates the admin on first run
    admin_password = database.db_manager.InitializeDatabase()
    if admin_password:
        logger.warning("=" * 60)
        logger.warning("NEW ADMIN USER CREATED")
        logger.warning("Username: admin")
        logger.warning(f"Password: {admin_password}")
        logger.warning("SAVE THIS PASSWORD - IT WILL NOT BE SHOWN AGAIN!")
        logger.warning("=" * 60)

    logger.info("Database initialized successfully")
    logger.info("Server startup complete")

    yield

    logger.info("CaptureDesk Server shutting down...")
    CleanupExpiredSessions()
    logger.info("Shutdown complete")


# ==================== FastAPI Application ====================

app = FastAPI(
    title="CaptureDesk Server",
    description="Payload capture server admin interface",
    version="1.0.0",
    lifespan=lifespan
)

# Refuse normal traffic while the killswitch is set
app.middleware("http")(KillswitchGuard)

# ==================== Static Files ====================

# Theme stylesheets
app.mount("/assets/css", StaticFiles(directory=str(THEMES_DIR)), name="themes")


# ==================== Routers ====================

from routes import status
from routes.admin import auth as admin_auth, settings as admin_settings

app.include_router(status.router)
app.include_router(admin_auth.router)
app.include_router(admin_settings.router)


# ==================== Main Entry Point ====================

if __name__ == "__main__":
    logger.info("Starting CaptureDesk Server...")

    # host="0.0.0.0" allows connections from other machines on the network
    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        log_level="info"
    )
