"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import (
    LEADERBOARD_DISPLAY_SIZE,
    LEADERBOARD_MAX_ENTRIES,
    MESSAGE_TTL_SECONDS,
    RESET_DELAY_SECONDS,
)

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "display_size": LEADERBOARD_DISPLAY_SIZE,
        "max_entries": LEADERBOARD_MAX_ENTRIES,
        "message_ttl_seconds": MESSAGE_TTL_SECONDS,
        "reset_delay_seconds": RESET_DELAY_SECONDS,
    }


__all__ = ["router"]
