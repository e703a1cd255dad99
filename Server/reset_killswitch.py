#!/usr/bin/env python3
"""
CaptureDesk Server - Killswitch Reset Script

Clears the killswitch so the server resumes normal operation. The password
given when the killswitch was set is required.

Usage:
    python reset_killswitch.py <password>
"""

import secrets
import sys
from pathlib import Path

# Ensure we can import from the same directory
sys.path.insert(0, str(Path(__file__).parent))

from managers.database_manager import DatabaseManager
from managers.setting_store import SettingStore


def reset_killswitch(db_manager, password: str) -> bool:
    """
    Clear the killswitch if the password matches

    Args:
        db_manager: DatabaseManager instance
        password: Password supplied when the killswitch was set

    Returns:
        bool: True if the killswitch was cleared
    """
    setting_store = SettingStore(db_manager)
    current = setting_store.Get("killswitch")

    if not current:
        print("Killswitch is not set - nothing to do.")
        return False

    if not secrets.compare_digest(current.encode("utf-8"), password.encode("utf-8")):
        print("Password does not match - killswitch left in place.")
        return False

    setting_store.Set("killswitch", "")
    print("Killswitch cleared - the server resumes normal operation.")
    return True


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python reset_killswitch.py <password>")
        sys.exit(1)

    if not reset_killswitch(DatabaseManager(), sys.argv[1]):
        sys.exit(1)
