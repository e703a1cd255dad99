"""
CaptureDesk Server - Settings Catalog

Fixed key names, alert method identifiers and default values for the
operational configuration.
"""

# Alert group used for server-wide alerting
GLOBAL_GROUP = 0

# Alert method ids, in the order the global alert section processes them
METHOD_MAIL = 1
METHOD_TELEGRAM = 2
METHOD_SLACK = 3
METHOD_DISCORD = 4

ALERT_METHODS = {
    METHOD_MAIL: "mail",
    METHOD_TELEGRAM: "telegram",
    METHOD_SLACK: "slack",
    METHOD_DISCORD: "discord",
}

# Payload capture options; each maps to a "collect_<option>" setting
CAPTURE_OPTIONS = [
    "uri", "ip", "referer", "user-agent", "cookies", "localstorage",
    "sessionstorage", "dom", "origin", "screenshot",
]

# Settings rendered as checkboxes on the settings page
BOOLEAN_SETTINGS = [f"collect_{option}" for option in CAPTURE_OPTIONS] + [
    "alert-mail", "alert-telegram", "alert-slack", "alert-discord", "alert-callback",
]

DEFAULT_SETTINGS = {
    "timezone": "UTC",
    "theme": "classic",
    "dompart": "500",
    "filter-save": "0",
    "filter-alert": "1",
    "customjs": "",
    "alert-mail": "0",
    "alert-telegram": "0",
    "alert-slack": "0",
    "alert-discord": "0",
    "alert-callback": "0",
    "callback-url": "",
    "killswitch": "",
}
DEFAULT_SETTINGS.update({f"collect_{option}": "1" for option in CAPTURE_OPTIONS})
