from datetime import timedelta
from enum import StrEnum


class Expiration(StrEnum):
    """Expiration classes accepted when creating a link."""

    NEVER = 'never'
    TEN_MINUTES = '10m'
    THIRTY_MINUTES = '30m'
    ONE_HOUR = '1h'
    ONE_DAY = '24h'
    ONE_WEEK = '7d'
    ONE_MONTH = '30d'


# Lifetime of each expiration class (Expiration.NEVER has none)
EXPIRATION_DURATIONS = {
    Expiration.TEN_MINUTES: timedelta(minutes=10),
    Expiration.THIRTY_MINUTES: timedelta(minutes=30),
    Expiration.ONE_HOUR: timedelta(hours=1),
    Expiration.ONE_DAY: timedelta(days=1),
    Expiration.ONE_WEEK: timedelta(days=7),
    Expiration.ONE_MONTH: timedelta(days=30),
}


class Shortcode:
    """Shortcode generation defaults."""

    LENGTH = 6  # Length of randomly generated shortcodes
    MAX_ATTEMPTS = 10  # Collision checks before settling on the last generated code
    # User-chosen shortcodes: any printable characters that fit in one path segment
    CUSTOM_PATTERN = r'[^\s/?#\x00-\x1f\x7f-\x9f]{1,256}'
    # Paths claimed by other routes, never reachable as GET /{shortcode}
    RESERVED = frozenset({'api', 'stats', 'validate', 'logout'})


class Session:
    """Statistics page session cookie."""

    COOKIE_NAME = 'validated'
    MAX_AGE = 3600  # 1 hour
    # SHA-256 of 'password'. Only ever used when running locally.
    DEV_PASSWORD_HASH = '5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8'  # noqa: S105


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        HOME_PATH = 'HOME_PATH'
        STATS_PASSWORD_HASH = 'STATS_PASSWORD_HASH'  # noqa: S105

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
