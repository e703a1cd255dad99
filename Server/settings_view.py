"""
CaptureDesk Server - Settings Page View Data

Builds the template context of the settings page from the current stored
values.
"""

from pathlib import Path
from typing import Optional

from settings_catalog import (
    BOOLEAN_SETTINGS, GLOBAL_GROUP,
    METHOD_MAIL, METHOD_TELEGRAM, METHOD_SLACK, METHOD_DISCORD,
)
from themes import ListInstalledThemes
from timezones import ListTimezones


def BuildSettingsContext(setting_store, alert_store, themes_dir: Optional[Path] = None) -> dict:
    """
    Collect everything the settings template renders

    Args:
        setting_store: SettingStore instance
        alert_store: AlertStore instance
        themes_dir: Directory of installed themes (defaults to themes.THEMES_DIR)

    Returns:
        dict: Template context values
    """
    current_timezone = setting_store.Get("timezone")
    timezones = [
        {"value": name, "label": name, "selected": name == current_timezone}
        for name in ListTimezones()
    ]

    current_theme = setting_store.Get("theme")
    themes = [
        {"value": name, "label": name[:1].upper() + name[1:], "selected": name == current_theme}
        for name in ListInstalledThemes(themes_dir)
    ]

    filter_save = setting_store.GetBool("filter-save")
    filter_alert = setting_store.GetBool("filter-alert")
    filters = {
        "filter1": filter_save and filter_alert,
        "filter2": filter_save and not filter_alert,
        "filter3": not filter_save and filter_alert,
        "filter4": not filter_save and not filter_alert,
    }

    checked = {key: setting_store.GetBool(key) for key in BOOLEAN_SETTINGS}

    # Global alert channels
    checked["mailAll"] = alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "enabled")
    checked["telegramAll"] = alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "enabled")
    checked["slackAll"] = alert_store.Get(GLOBAL_GROUP, METHOD_SLACK, "enabled")
    checked["discordAll"] = alert_store.Get(GLOBAL_GROUP, METHOD_DISCORD, "enabled")

    values = {
        "email": alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "value1"),
        "telegramToken": alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "value1"),
        "telegramChatID": alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "value2"),
        "slackWebhook": alert_store.Get(GLOBAL_GROUP, METHOD_SLACK, "value1"),
        "discordWebhook": alert_store.Get(GLOBAL_GROUP, METHOD_DISCORD, "value1"),
        "customjs": setting_store.Get("customjs"),
        "dompart": setting_store.Get("dompart"),
        "callbackURL": setting_store.Get("callback-url"),
    }

    return {
        "timezones": timezones,
        "themes": themes,
        "filters": filters,
        "checked": checked,
        "values": values,
    }
