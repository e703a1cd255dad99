"""
CaptureDesk Server - Settings Update Pipeline

Runs the settings sections present in a submitted form in a fixed order and
stops at the first rejected section.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from models.infrastructure import SettingsUpdateOutcome
from settings_sections import (
    ApplyApplicationSettings, ApplyPayloadSettings, ApplyGlobalAlertSettings,
    ApplyKillSwitch, ApplyAlertMethods, ApplyCallbackAlertSettings,
)

logger = logging.getLogger(__name__)

# Section marker fields, in execution order
SECTION_APPLICATION = "application"
SECTION_PAYLOAD = "global-payload"
SECTION_GLOBAL_ALERT = "global-alert"
SECTION_KILLSWITCH = "killswitch"
SECTION_ALERT_METHODS = "alert-methods"
SECTION_CALLBACK_ALERT = "callback-alert"

SECTION_ORDER = [
    SECTION_APPLICATION,
    SECTION_PAYLOAD,
    SECTION_GLOBAL_ALERT,
    SECTION_KILLSWITCH,
    SECTION_ALERT_METHODS,
    SECTION_CALLBACK_ALERT,
]


def PresentSections(form: Mapping[str, str]) -> list:
    """Sections whose marker field is in the form, in execution order"""
    return [section for section in SECTION_ORDER if section in form]


def RunSettingsUpdate(
    form: Mapping[str, str],
    setting_store,
    alert_store,
    themes_dir: Optional[Path] = None,
    username: str = ""
) -> SettingsUpdateOutcome:
    """
    Apply every section present in the form

    Sections run in SECTION_ORDER. The first rejection stops processing and its
    reason becomes the outcome message. A killswitch with a password also stops
    processing, since the system is disabled once it has run.

    Args:
        form: Submitted form fields (already CSRF checked by the caller)
        setting_store: SettingStore instance
        alert_store: AlertStore instance
        themes_dir: Directory of installed themes (defaults to themes.THEMES_DIR)
        username: Admin submitting the form, for logging

    Returns:
        SettingsUpdateOutcome
    """
    outcome = SettingsUpdateOutcome()

    for section in PresentSections(form):
        if section == SECTION_KILLSWITCH:
            outcome.killswitch_message = ApplyKillSwitch(form, setting_store)
            outcome.sections_applied.append(section)
            if outcome.Killed:
                logger.warning(f"Admin '{username}' activated the killswitch")
                break
            continue

        if section == SECTION_APPLICATION:
            result = ApplyApplicationSettings(form, setting_store, themes_dir)
        elif section == SECTION_PAYLOAD:
            result = ApplyPayloadSettings(form, setting_store)
        elif section == SECTION_GLOBAL_ALERT:
            result = ApplyGlobalAlertSettings(form, alert_store)
        elif section == SECTION_ALERT_METHODS:
            result = ApplyAlertMethods(form, setting_store)
        else:
            result = ApplyCallbackAlertSettings(form, setting_store)

        if not result.accepted:
            outcome.failed_section = section
            outcome.message = result.reason
            logger.warning(f"Admin '{username}' settings section '{section}' rejected: {result.reason}")
            break

        outcome.sections_applied.append(section)
        logger.info(f"Admin '{username}' updated settings section '{section}'")

    return outcome
