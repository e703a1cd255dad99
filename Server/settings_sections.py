"""
CaptureDesk Server - Settings Section Handlers

Each handler takes the submitted form and the stores it writes to, validates
its own fields and persists them. Handlers return a ValidationResult: on
rejection the reason is returned as soon as it is found and no later field of
the section is processed.

Writes are committed one at a time. The global alert section and the callback
alert section can therefore leave earlier writes in place when a later field
is rejected.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from models.infrastructure import ValidationResult
from settings_catalog import (
    CAPTURE_OPTIONS, GLOBAL_GROUP,
    METHOD_MAIL, METHOD_TELEGRAM, METHOD_SLACK, METHOD_DISCORD,
)
from validators import (
    ValidateTimezone, ValidateTheme, ValidateDomPart, ParseFilter,
    ValidateEmail, ValidateTelegram, ValidateSlackWebhook, ValidateDiscordWebhook,
    ValidateCallbackUrl,
)

logger = logging.getLogger(__name__)

KILLSWITCH_MESSAGE = "CaptureDesk is now killed with password {password}"

# Toggle field for each alert method setting
ALERT_METHOD_TOGGLES = {
    "alert-mail": "mailon",
    "alert-telegram": "telegramon",
    "alert-slack": "slackon",
    "alert-discord": "discordon",
}


def ApplyApplicationSettings(form: Mapping[str, str], setting_store, themes_dir: Optional[Path] = None) -> ValidationResult:
    """
    Update timezone, theme, capture filter and DOM part length

    Validates timezone, theme and dompart in that order. Nothing is written
    unless all of them are accepted.

    Args:
        form: Submitted form fields
        setting_store: SettingStore to write to
        themes_dir: Directory of installed themes (defaults to themes.THEMES_DIR)

    Returns:
        ValidationResult: Accept() or the first rejection
    """
    timezone = ValidateTimezone(form.get("timezone", ""))
    if not timezone.accepted:
        return timezone

    theme = ValidateTheme(form.get("theme", ""), themes_dir)
    if not theme.accepted:
        return theme

    dompart = ValidateDomPart(form.get("dompart", ""))
    if not dompart.accepted:
        return dompart

    filter_save, filter_alert = ParseFilter(form.get("filter"))

    setting_store.Set("dompart", dompart.value)
    setting_store.SetBool("filter-save", filter_save)
    setting_store.SetBool("filter-alert", filter_alert)
    setting_store.Set("timezone", timezone.value)
    setting_store.Set("theme", theme.value)

    return ValidationResult.Accept()


def ApplyPayloadSettings(form: Mapping[str, str], setting_store) -> ValidationResult:
    """
    Update which payload data is collected and the custom JavaScript

    An option is collected when its key is present in the form. customjs is
    stored verbatim. Never rejects.
    """
    for option in CAPTURE_OPTIONS:
        setting_store.SetBool(f"collect_{option}", option in form)

    setting_store.Set("customjs", form.get("customjs", ""))

    return ValidationResult.Accept()


def ApplyGlobalAlertSettings(form: Mapping[str, str], alert_store) -> ValidationResult:
    """
    Update the global alert channels: mail, telegram, slack, discord

    Channels are validated and written one after another. A rejected channel
    stops the section; channels before it stay written.
    """
    mail = ValidateEmail(form.get("mail", ""))
    if not mail.accepted:
        return mail
    alert_store.Set(GLOBAL_GROUP, METHOD_MAIL, "mailon" in form, mail.value)

    telegram = ValidateTelegram(form.get("telegram_bottoken", ""), form.get("chatid", ""))
    if not telegram.accepted:
        return telegram
    token, chat_id = telegram.value
    alert_store.Set(GLOBAL_GROUP, METHOD_TELEGRAM, "telegramon" in form, token, chat_id)

    slack = ValidateSlackWebhook(form.get("slack_webhook", ""))
    if not slack.accepted:
        return slack
    alert_store.Set(GLOBAL_GROUP, METHOD_SLACK, "slackon" in form, slack.value)

    discord = ValidateDiscordWebhook(form.get("discord_webhook", ""))
    if not discord.accepted:
        return discord
    alert_store.Set(GLOBAL_GROUP, METHOD_DISCORD, "discordon" in form, discord.value)

    return ValidationResult.Accept()


def ApplyAlertMethods(form: Mapping[str, str], setting_store) -> ValidationResult:
    """Switch each alert method on or off from its toggle field. Never rejects."""
    for setting_key, toggle in ALERT_METHOD_TOGGLES.items():
        setting_store.SetBool(setting_key, toggle in form)

    return ValidationResult.Accept()


def ApplyCallbackAlertSettings(form: Mapping[str, str], setting_store) -> ValidationResult:
    """
    Update the callback alert toggle and URL

    The toggle is written before the URL is validated, so it is kept even if
    the URL is rejected.
    """
    setting_store.SetBool("alert-callback", "callbackon" in form)

    url = ValidateCallbackUrl(form.get("callback_url", ""))
    if not url.accepted:
        return url
    setting_store.Set("callback-url", url.value)

    return ValidationResult.Accept()


def ApplyKillSwitch(form: Mapping[str, str], setting_store) -> Optional[str]:
    """
    Disable the system

    Stores the supplied password as the killswitch value. An empty password
    stores an empty value, which leaves the system running.

    Returns:
        Optional[str]: Confirmation message for the operator, including the
        password, or None when the system was not disabled
    """
    password = form.get("password", "") or ""
    setting_store.Set("killswitch", password)
    if not password:
        logger.info("Killswitch submitted without a password, system stays enabled")
        return None
    logger.warning("Killswitch activated, system is now disabled")
    return KILLSWITCH_MESSAGE.format(password=password)
