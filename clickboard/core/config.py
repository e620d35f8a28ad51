"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc
    if value <= 0:
        raise RuntimeError(f"{name} must be positive")
    return value


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Remote document store ------------------------------------------------------
JSONBIN_API_BASE = "https://api.jsonbin.io/v3"


def _store_url() -> str:
    url = os.getenv("LEADERBOARD_STORE_URL")
    if url:
        return url
    bin_id = os.getenv("JSONBIN_BIN_ID")
    if not bin_id:
        raise RuntimeError(
            "Missing required environment variable: "
            "LEADERBOARD_STORE_URL (or JSONBIN_BIN_ID)"
        )
    return f"{JSONBIN_API_BASE}/b/{bin_id}"


LEADERBOARD_STORE_URL = _store_url()
LEADERBOARD_MASTER_KEY = _require_env("LEADERBOARD_MASTER_KEY")
STORE_TIMEOUT_SECONDS = _env_number("STORE_TIMEOUT_SECONDS", 20.0)


# Leaderboard behaviour ------------------------------------------------------
LEADERBOARD_DISPLAY_SIZE = _env_int("LEADERBOARD_DISPLAY_SIZE", 10)
LEADERBOARD_MAX_ENTRIES = _env_int("LEADERBOARD_MAX_ENTRIES", 100)
MESSAGE_TTL_SECONDS = _env_number("MESSAGE_TTL_SECONDS", 3.0)
RESET_DELAY_SECONDS = _env_number("RESET_DELAY_SECONDS", 3.0)


# Application security -------------------------------------------------------
SECRET_KEY = _require_env("SECRET_KEY")

# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)

COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "JSONBIN_API_BASE",
    "LEADERBOARD_DISPLAY_SIZE",
    "LEADERBOARD_MASTER_KEY",
    "LEADERBOARD_MAX_ENTRIES",
    "LEADERBOARD_STORE_URL",
    "LOG_LEVEL",
    "MESSAGE_TTL_SECONDS",
    "RESET_DELAY_SECONDS",
    "SECRET_KEY",
    "STORE_TIMEOUT_SECONDS",
]
