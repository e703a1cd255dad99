"""
Tests for the settings section handlers in CaptureDesk Server

Each handler is run against a temporary SQLite database.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import validators
from settings_catalog import CAPTURE_OPTIONS, GLOBAL_GROUP, METHOD_MAIL, METHOD_TELEGRAM, METHOD_SLACK, METHOD_DISCORD
from settings_sections import (
    ApplyApplicationSettings, ApplyPayloadSettings, ApplyGlobalAlertSettings,
    ApplyAlertMethods, ApplyCallbackAlertSettings, ApplyKillSwitch,
)


def ApplicationForm(**overrides):
    form = {"timezone": "Europe/Amsterdam", "theme": "dark", "filter": "2", "dompart": "128"}
    form.update(overrides)
    return form


def test_application_settings_saved(setting_store, themes_dir):
    """All five settings are written on success"""
    result = ApplyApplicationSettings(ApplicationForm(), setting_store, themes_dir)

    assert result.accepted
    assert setting_store.Get("timezone") == "Europe/Amsterdam"
    assert setting_store.Get("theme") == "dark"
    assert setting_store.Get("dompart") == "128"
    assert setting_store.Get("filter-save") == "1"
    assert setting_store.Get("filter-alert") == "0"


def test_application_filter_grid(setting_store, themes_dir):
    """Each filter choice stores its save/alert pair"""
    expected = {"1": ("1", "1"), "2": ("1", "0"), "3": ("0", "1"), "4": ("0", "0"), "9": ("0", "0")}
    for choice, (save, alert) in expected.items():
        assert ApplyApplicationSettings(ApplicationForm(filter=choice), setting_store, themes_dir).accepted
        assert setting_store.Get("filter-save") == save
        assert setting_store.Get("filter-alert") == alert


def test_application_rejection_writes_nothing(setting_store, themes_dir):
    """A rejected field leaves every application setting untouched"""
    before = setting_store.GetAll()

    result = ApplyApplicationSettings(ApplicationForm(dompart="12a"), setting_store, themes_dir)

    assert not result.accepted
    assert result.reason == validators.DOMPART_NOT_DIGITS
    assert setting_store.GetAll() == before


def test_application_validation_order(setting_store, themes_dir):
    """Timezone is reported before theme, theme before dompart"""
    result = ApplyApplicationSettings(
        ApplicationForm(timezone="Nowhere/City", theme="neon", dompart="x"), setting_store, themes_dir
    )
    assert result.reason == validators.TIMEZONE_INVALID

    result = ApplyApplicationSettings(ApplicationForm(theme="neon", dompart="x"), setting_store, themes_dir)
    assert result.reason == validators.THEME_NOT_INSTALLED


def test_application_missing_fields_rejected(setting_store, themes_dir):
    """Missing fields are treated as empty input"""
    result = ApplyApplicationSettings({}, setting_store, themes_dir)
    assert result.reason == validators.TIMEZONE_INVALID


def test_application_stores_sanitized_theme(setting_store, themes_dir):
    """The stored theme is the stripped name"""
    assert ApplyApplicationSettings(ApplicationForm(theme="<dark>"), setting_store, themes_dir).accepted
    assert setting_store.Get("theme") == "dark"


def test_payload_presence_flags(setting_store):
    """Present options are collected, absent ones switched off"""
    result = ApplyPayloadSettings({"cookies": "on", "dom": "", "customjs": "alert(document.domain)"}, setting_store)

    assert result.accepted
    for option in CAPTURE_OPTIONS:
        expected = "1" if option in ("cookies", "dom") else "0"
        assert setting_store.Get(f"collect_{option}") == expected
    assert setting_store.Get("customjs") == "alert(document.domain)"


def test_payload_never_rejects(setting_store):
    """Any content is accepted; customjs defaults to empty"""
    setting_store.Set("customjs", "old();")

    result = ApplyPayloadSettings({"uri": "<script>", "unknown": "x"}, setting_store)

    assert result.accepted
    assert setting_store.Get("collect_uri") == "1"
    assert setting_store.Get("customjs") == ""


def test_global_alerts_saved(alert_store):
    """All four channels are written with their toggles"""
    form = {
        "mailon": "on", "mail": "a@b.com",
        "telegram_bottoken": "123:abc", "chatid": "42",
        "slackon": "on", "slack_webhook": "https://hooks.slack.com/services/T1/B2/C3",
        "discordon": "on", "discord_webhook": "https://discord.com/api/webhooks/1/tok",
    }

    assert ApplyGlobalAlertSettings(form, alert_store).accepted

    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "enabled") is True
    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "value1") == "a@b.com"
    assert alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "enabled") is False
    assert alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "value1") == "123:abc"
    assert alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "value2") == "42"
    assert alert_store.Get(GLOBAL_GROUP, METHOD_SLACK, "value1") == "https://hooks.slack.com/services/T1/B2/C3"
    assert alert_store.Get(GLOBAL_GROUP, METHOD_DISCORD, "enabled") is True
    assert alert_store.Get(GLOBAL_GROUP, METHOD_DISCORD, "value1") == "https://discord.com/api/webhooks/1/tok"


def test_global_alerts_partial_write(alert_store):
    """Channels before a rejected channel stay written, later ones are skipped"""
    alert_store.Set(GLOBAL_GROUP, METHOD_SLACK, True, "https://hooks.slack.com/services/OLD/OLD/OLD")
    form = {
        "mailon": "on", "mail": "ops@mydomain.org",
        "telegram_bottoken": "abc!def", "chatid": "42",
        "slack_webhook": "",
    }

    result = ApplyGlobalAlertSettings(form, alert_store)

    assert not result.accepted
    assert result.reason == validators.TELEGRAM_TOKEN_INVALID
    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "value1") == "ops@mydomain.org"
    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "enabled") is True
    assert alert_store.Get(GLOBAL_GROUP, METHOD_TELEGRAM, "value1") == ""
    assert alert_store.Get(GLOBAL_GROUP, METHOD_SLACK, "value1") == "https://hooks.slack.com/services/OLD/OLD/OLD"


def test_global_alerts_empty_values_clear_channels(alert_store):
    """Empty inputs are valid and clear the stored values"""
    alert_store.Set(GLOBAL_GROUP, METHOD_MAIL, True, "a@b.com")

    assert ApplyGlobalAlertSettings({}, alert_store).accepted
    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "value1") == ""
    assert alert_store.Get(GLOBAL_GROUP, METHOD_MAIL, "enabled") is False


def test_alert_methods_toggles(setting_store):
    """Each method follows its toggle's presence"""
    assert ApplyAlertMethods({"mailon": "on", "discordon": "on"}, setting_store).accepted

    assert setting_store.Get("alert-mail") == "1"
    assert setting_store.Get("alert-telegram") == "0"
    assert setting_store.Get("alert-slack") == "0"
    assert setting_store.Get("alert-discord") == "1"


def test_callback_saved(setting_store):
    """Toggle and URL are written"""
    form = {"callbackon": "on", "callback_url": "https://example.com/hook"}

    assert ApplyCallbackAlertSettings(form, setting_store).accepted
    assert setting_store.Get("alert-callback") == "1"
    assert setting_store.Get("callback-url") == "https://example.com/hook"


def test_callback_toggle_kept_when_url_rejected(setting_store):
    """The toggle is committed before the URL is validated"""
    setting_store.Set("callback-url", "https://example.com/old")

    result = ApplyCallbackAlertSettings({"callbackon": "on", "callback_url": "ftp://example.com"}, setting_store)

    assert not result.accepted
    assert result.reason == validators.CALLBACK_URL_INVALID
    assert setting_store.Get("alert-callback") == "1"
    assert setting_store.Get("callback-url") == "https://example.com/old"


def test_killswitch(setting_store):
    """Password is stored and echoed in the message"""
    message = ApplyKillSwitch({"password": "p"}, setting_store)

    assert setting_store.Get("killswitch") == "p"
    assert "p" in message
    assert message == "CaptureDesk is now killed with password p"


def test_killswitch_without_password_keeps_system_running(setting_store):
    """An empty password stores an empty value and disables nothing"""
    setting_store.Set("killswitch", "")

    message = ApplyKillSwitch({"password": ""}, setting_store)

    assert message is None
    assert setting_store.Get("killswitch") == ""
