"""
CaptureDesk Server - Settings Validators

One function per field rule. Each returns a ValidationResult holding either
the accepted value or the human-readable rejection reason.
"""

import re
from pathlib import Path
from typing import Optional, Tuple

from email_validator import validate_email, EmailNotValidError
from pydantic import AnyUrl, TypeAdapter, ValidationError

from models.infrastructure import ValidationResult
from themes import ThemeIsInstalled
from timezones import IsValidTimezone

# Rejection reasons
TIMEZONE_INVALID = "The timezone is not a valid timezone."
THEME_NOT_INSTALLED = "This theme is not installed."
DOMPART_NOT_DIGITS = "The dom length needs to be digits."
EMAIL_INVALID = "This is not a correct email address."
TELEGRAM_TOKEN_INVALID = "This does not look like an valid Telegram bot token."
TELEGRAM_CHAT_ID_INVALID = "The chat id needs to be a digits."
SLACK_WEBHOOK_INVALID = "This does not look like an valid Slack webhook URL."
DISCORD_WEBHOOK_INVALID = "This does not look like an valid Discord webhook URL."
CALLBACK_URL_INVALID = "Invalid callback URL."

DIGITS_RE = re.compile(r"[0-9]+")
THEME_STRIP_RE = re.compile(r"[^a-zA-Z0-9]")
TELEGRAM_TOKEN_RE = re.compile(r"[a-zA-Z0-9:_-]+")
SLACK_WEBHOOK_RE = re.compile(r"https://hooks\.slack\.com/services/[a-zA-Z0-9]+/[a-zA-Z0-9_-]+/[a-zA-Z0-9_-]+")
DISCORD_WEBHOOK_RE = re.compile(r"https://(discord|discordapp)\.com/api/webhooks/[0-9]+/[a-zA-Z0-9_-]+")
# Numeric string with optional sign, fraction and exponent
NUMERIC_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
# Scheme and authority prefix required of callback URLs
CALLBACK_PREFIX_RE = re.compile(r"https?://[^/?#]")

_url_adapter = TypeAdapter(AnyUrl)

# Filter choice -> (save, alert)
FILTER_CHOICES = {
    1: (True, True),
    2: (True, False),
    3: (False, True),
    4: (False, False),
}


def ValidateTimezone(timezone: Optional[str]) -> ValidationResult:
    """Timezone must be an exact timezone identifier"""
    if timezone is None or not IsValidTimezone(timezone):
        return ValidationResult.Reject(TIMEZONE_INVALID)
    return ValidationResult.Accept(timezone)


def ValidateTheme(theme: Optional[str], themes_dir: Optional[Path] = None) -> ValidationResult:
    """
    Sanitize a theme name and check that it is installed

    Everything outside [A-Za-z0-9] is removed first; the accepted value is the
    sanitized name.
    """
    name = THEME_STRIP_RE.sub("", theme or "")
    if not ThemeIsInstalled(name, themes_dir):
        return ValidationResult.Reject(THEME_NOT_INSTALLED)
    return ValidationResult.Accept(name)


def ValidateDomPart(dompart: Optional[str]) -> ValidationResult:
    """DOM part length must be one or more ASCII digits"""
    if dompart is None or not DIGITS_RE.fullmatch(dompart):
        return ValidationResult.Reject(DOMPART_NOT_DIGITS)
    return ValidationResult.Accept(dompart)


def ParseFilter(choice: Optional[str]) -> Tuple[bool, bool]:
    """
    Split a filter choice into (filter_save, filter_alert)

    The choice is compared by numeric value, so "01" and "1.0" both select
    choice 1. Unknown choices turn both off.
    """
    choice = (choice or "").strip()
    if not NUMERIC_RE.fullmatch(choice):
        return (False, False)
    number = float(choice)
    if not number.is_integer():
        return (False, False)
    return FILTER_CHOICES.get(int(number), (False, False))


def ValidateEmail(email: Optional[str]) -> ValidationResult:
    """Empty is allowed; anything else must be a syntactically valid address"""
    if not email:
        return ValidationResult.Accept("")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return ValidationResult.Reject(EMAIL_INVALID)
    return ValidationResult.Accept(email)


def ValidateTelegram(token: Optional[str], chat_id: Optional[str]) -> ValidationResult:
    """
    Validate a Telegram bot token and chat id pair

    Both empty is allowed. Otherwise the token is checked first, then the chat
    id. The accepted value is the (token, chat_id) tuple.
    """
    token = token or ""
    chat_id = chat_id or ""
    if token or chat_id:
        if not TELEGRAM_TOKEN_RE.fullmatch(token):
            return ValidationResult.Reject(TELEGRAM_TOKEN_INVALID)
        if not DIGITS_RE.fullmatch(chat_id):
            return ValidationResult.Reject(TELEGRAM_CHAT_ID_INVALID)
    return ValidationResult.Accept((token, chat_id))


def ValidateSlackWebhook(webhook: Optional[str]) -> ValidationResult:
    """Empty is allowed; otherwise a hooks.slack.com services URL"""
    if not webhook:
        return ValidationResult.Accept("")
    if not SLACK_WEBHOOK_RE.fullmatch(webhook):
        return ValidationResult.Reject(SLACK_WEBHOOK_INVALID)
    return ValidationResult.Accept(webhook)


def ValidateDiscordWebhook(webhook: Optional[str]) -> ValidationResult:
    """Empty is allowed; otherwise a discord(app).com webhook URL with a numeric id"""
    if not webhook:
        return ValidationResult.Accept("")
    if not DISCORD_WEBHOOK_RE.fullmatch(webhook):
        return ValidationResult.Reject(DISCORD_WEBHOOK_INVALID)
    return ValidationResult.Accept(webhook)


def ValidateCallbackUrl(url: Optional[str]) -> ValidationResult:
    """
    Empty is allowed; otherwise an http(s) URL with a host

    The stored value is the raw input, so whitespace and control characters
    are refused outright instead of being normalized away by the URL parser.
    """
    if not url:
        return ValidationResult.Accept("")
    if any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url):
        return ValidationResult.Reject(CALLBACK_URL_INVALID)
    if not CALLBACK_PREFIX_RE.match(url):
        return ValidationResult.Reject(CALLBACK_URL_INVALID)
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        return ValidationResult.Reject(CALLBACK_URL_INVALID)
    if not parsed.host:
        return ValidationResult.Reject(CALLBACK_URL_INVALID)
    return ValidationResult.Accept(url)
