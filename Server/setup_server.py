#!/usr/bin/env python3
"""
CaptureDesk Server - Setup Script

This script initializes the CaptureDesk server for deployment:
1. Creates SQLite database with schema
2. Populates default settings and global alert channels
3. Creates the default admin user

Usage:
    python setup_server.py
"""

import sys
from pathlib import Path

# Ensure we can import from the same directory
sys.path.insert(0, str(Path(__file__).parent))

from managers.database_manager import DatabaseManager, DEFAULT_DB_PATH
from themes import ListInstalledThemes


def print_header():
    """Print script header"""
    print("=" * 70)
    print("CaptureDesk Server - Setup Script")
    print("=" * 70)
    print()


def print_section(title):
    """Print section header"""
    print()
    print("-" * 70)
    print(f"  {title}")
    print("-" * 70)


def initialize_database():
    """
    Initialize the SQLite database with schema and default data

    Returns:
        str or None: Admin password if created, None otherwise
    """
    print_section("Database Initialization")

    db_path = Path(DEFAULT_DB_PATH)

    if db_path.exists():
        print(f"[OK] Database file found at: {db_path.absolute()}")
        print("  Existing database will be updated with any missing tables/settings.")
    else:
        print(f"-> Creating new database at: {db_path.absolute()}")

    print()

    try:
        db_manager = DatabaseManager()
        admin_password = db_manager.InitializeDatabase()

        print("[OK] Database initialization complete!")

        return admin_password

    except Exception as e:
        print(f"[ERROR] Database initialization failed: {str(e)}")
        raise


def check_themes():
    """List the installed themes so a missing assets directory is noticed early"""
    print_section("Installed Themes")

    themes = ListInstalledThemes()
    if not themes:
        print("[WARNING] No themes found in assets/css - the application settings form will reject every theme")
        return

    for theme in themes:
        print(f"  - {theme}")


def print_admin_credentials(password):
    """
    Print admin credentials prominently

    Args:
        password: Generated admin password
    """
    print()
    print("!" * 70)
    print("!  IMPORTANT: SAVE THESE CREDENTIALS - PASSWORD SHOWN ONLY ONCE!  !")
    print("!" * 70)
    print()
    print("  Admin Username: admin")
    print(f"  Admin Password: {password}")
    print()


def main():
    """Main setup script entry point"""
    print_header()

    try:
        admin_password = initialize_database()
    except Exception:
        print("\n[ERROR] Setup failed during database initialization")
        sys.exit(1)

    check_themes()

    print()
    print("=" * 70)
    print("[OK] CaptureDesk Server Setup Complete!")
    print("=" * 70)

    if admin_password:
        print_admin_credentials(admin_password)
    else:
        print()
        print("  Database already contained users - no new admin account created.")
        print()

    print("Start the server with:  python server.py")
    print("Then open http://localhost:8000/admin")
    print()


if __name__ == "__main__":
    main()
