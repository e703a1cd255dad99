"""
Tests for the settings field validators in CaptureDesk Server
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import validators
from validators import (
    ValidateTimezone, ValidateTheme, ValidateDomPart, ParseFilter, ValidateEmail,
    ValidateTelegram, ValidateSlackWebhook, ValidateDiscordWebhook, ValidateCallbackUrl,
)
from timezones import ListTimezones


def test_timezone_accepts_every_identifier():
    """Every listed identifier is accepted as-is"""
    timezones = ListTimezones()
    assert "UTC" in timezones
    assert "Europe/Amsterdam" in timezones

    for name in timezones:
        result = ValidateTimezone(name)
        assert result.accepted
        assert result.value == name


def test_timezone_rejects_unknown():
    """Anything outside the identifier set is rejected"""
    for name in ["Mars/Olympus", "", "Europe/Amsterdam ", "Factory", None]:
        result = ValidateTimezone(name)
        assert not result.accepted
        assert result.reason == validators.TIMEZONE_INVALID


def test_timezone_rejects_legacy_aliases():
    """Backward-compatibility links are not offered or accepted"""
    aliases = ["US/Pacific", "Etc/GMT+5", "EST5EDT", "Zulu", "GMT", "W-SU", "Asia/Calcutta", "Europe/Kiev"]
    timezones = ListTimezones()

    for name in aliases:
        assert name not in timezones
        result = ValidateTimezone(name)
        assert not result.accepted
        assert result.reason == validators.TIMEZONE_INVALID

    assert ValidateTimezone("America/Los_Angeles").accepted
    assert ValidateTimezone("Asia/Kolkata").accepted


def test_theme_is_sanitized(themes_dir):
    """Non-alphanumeric characters are stripped before the lookup"""
    result = ValidateTheme("dark!!", themes_dir)
    assert result.accepted
    assert result.value == "dark"

    assert ValidateTheme("classic", themes_dir).value == "classic"


def test_theme_must_be_installed(themes_dir):
    """Unknown or empty theme names are rejected"""
    for name in ["neon", "", "../etc/passwd", "!!!"]:
        result = ValidateTheme(name, themes_dir)
        assert not result.accepted
        assert result.reason == validators.THEME_NOT_INSTALLED


def test_dompart_digits():
    """DOM length must be ASCII digits only"""
    result = ValidateDomPart("128")
    assert result.accepted
    assert result.value == "128"

    for value in ["12a", "", "-5", "1.5", " 12", "١٢", "12\n"]:
        result = ValidateDomPart(value)
        assert not result.accepted
        assert result.reason == validators.DOMPART_NOT_DIGITS


def test_filter_choices():
    """Filter choice maps to (save, alert)"""
    assert ParseFilter("1") == (True, True)
    assert ParseFilter("2") == (True, False)
    assert ParseFilter("3") == (False, True)
    assert ParseFilter("4") == (False, False)


def test_filter_unknown_choice_turns_both_off():
    """Unknown filter values never reject"""
    for value in ["5", "0", "", "abc", "1.5", "1x", "0x1", "inf", None]:
        assert ParseFilter(value) == (False, False)


def test_filter_compares_by_numeric_value():
    """Numeric spellings of a choice select that choice"""
    assert ParseFilter("01") == (True, True)
    assert ParseFilter("1.0") == (True, True)
    assert ParseFilter(" 2 ") == (True, False)
    assert ParseFilter("+3") == (False, True)
    assert ParseFilter("2e0") == (True, False)


def test_email():
    """Empty or well-formed addresses are accepted"""
    assert ValidateEmail("").accepted
    assert ValidateEmail("a@b.com").accepted
    assert ValidateEmail("a@b.com").value == "a@b.com"

    for value in ["not-an-email", "a@", "@b.com", "a b@c.com"]:
        result = ValidateEmail(value)
        assert not result.accepted
        assert result.reason == validators.EMAIL_INVALID


def test_telegram_pair():
    """Token and chat id are checked together"""
    result = ValidateTelegram("123456:ABC-def_1", "987654")
    assert result.accepted
    assert result.value == ("123456:ABC-def_1", "987654")

    # Both empty means the channel is not configured
    assert ValidateTelegram("", "").value == ("", "")


def test_telegram_rejects_bad_token_even_with_valid_chat_id():
    """Token is validated first"""
    result = ValidateTelegram("abc!def", "123")
    assert not result.accepted
    assert result.reason == validators.TELEGRAM_TOKEN_INVALID

    # Chat id without token
    result = ValidateTelegram("", "123")
    assert result.reason == validators.TELEGRAM_TOKEN_INVALID


def test_telegram_rejects_non_digit_chat_id():
    """Chat id must be digits"""
    for chat_id in ["", "-100", "12a"]:
        result = ValidateTelegram("123:abc", chat_id)
        assert not result.accepted
        assert result.reason == validators.TELEGRAM_CHAT_ID_INVALID


def test_slack_webhook():
    """Slack webhooks need the three path segments"""
    assert ValidateSlackWebhook("").accepted
    assert ValidateSlackWebhook("https://hooks.slack.com/services/T000/B000_x/XXXX-yyyy").accepted

    for value in [
        "https://hooks.slack.com/services/T000/B000",
        "https://hooks.slack.com/services/T-00/B000/XXXX",
        "http://hooks.slack.com/services/T000/B000/XXXX",
        "https://evil.com/?https://hooks.slack.com/services/A/B/C",
    ]:
        result = ValidateSlackWebhook(value)
        assert not result.accepted
        assert result.reason == validators.SLACK_WEBHOOK_INVALID


def test_discord_webhook():
    """Discord webhooks need a numeric id"""
    assert ValidateDiscordWebhook("").accepted
    assert ValidateDiscordWebhook("https://discord.com/api/webhooks/123456/abc_DEF-1").accepted
    assert ValidateDiscordWebhook("https://discordapp.com/api/webhooks/1/x").accepted

    for value in [
        "https://discord.com/api/webhooks/abc/token",
        "https://discord.gg/api/webhooks/1/token",
        "https://discord.com/api/webhooks/1/",
    ]:
        result = ValidateDiscordWebhook(value)
        assert not result.accepted
        assert result.reason == validators.DISCORD_WEBHOOK_INVALID


def test_callback_url():
    """Callback URLs must start with http and parse as URLs"""
    assert ValidateCallbackUrl("").accepted
    assert ValidateCallbackUrl("https://example.com/hook").accepted
    assert ValidateCallbackUrl("http://10.0.0.5:8080/alerts?key=1").accepted

    for value in ["ftp://example.com", "javascript:alert(1)", "http://", "http//missing-colon.com"]:
        result = ValidateCallbackUrl(value)
        assert not result.accepted
        assert result.reason == validators.CALLBACK_URL_INVALID


def test_callback_url_rejects_whitespace_and_missing_authority():
    """URLs the parser would only accept after normalizing them are refused"""
    for value in [
        "http://example.com/a\r\nX-Injected: 1",
        "http://example.com/a b",
        "http:example.com",
        "http://example.com\t/x",
        "http://example.com ",
        " http://example.com",
        "http:///path-only",
        "http://example.com/\x00",
    ]:
        result = ValidateCallbackUrl(value)
        assert not result.accepted
        assert result.reason == validators.CALLBACK_URL_INVALID
