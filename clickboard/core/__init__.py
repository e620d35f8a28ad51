"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    LEADERBOARD_DISPLAY_SIZE,
    LEADERBOARD_MASTER_KEY,
    LEADERBOARD_MAX_ENTRIES,
    LEADERBOARD_STORE_URL,
    MESSAGE_TTL_SECONDS,
    RESET_DELAY_SECONDS,
    SECRET_KEY,
    STORE_TIMEOUT_SECONDS,
)
from .errors import (
    ClickboardError,
    DocumentNotFound,
    InvalidTransition,
    MalformedDataError,
    TransportError,
    ValidationError,
)
from .logging import configure_logging
from .time import isoformat_z, parse_timestamp, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "LEADERBOARD_DISPLAY_SIZE",
    "LEADERBOARD_MASTER_KEY",
    "LEADERBOARD_MAX_ENTRIES",
    "LEADERBOARD_STORE_URL",
    "MESSAGE_TTL_SECONDS",
    "RESET_DELAY_SECONDS",
    "SECRET_KEY",
    "STORE_TIMEOUT_SECONDS",
    "ClickboardError",
    "DocumentNotFound",
    "InvalidTransition",
    "MalformedDataError",
    "TransportError",
    "ValidationError",
    "configure_logging",
    "isoformat_z",
    "parse_timestamp",
    "utcnow",
]
