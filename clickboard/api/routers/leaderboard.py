"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from ...core import ValidationError
from ...services import JsonStore, LeaderboardClient, default_store

router = APIRouter(prefix="/api", tags=["leaderboard"])


def board_payload(client: LeaderboardClient) -> Dict[str, Any]:
    """Serialise the client's rendered list and live message."""

    message = client.messages.current(client.clock())
    return {
        "leaderboard": client.target.to_dict(),
        "message": message.to_dict() if message else None,
    }


@router.get("/leaderboard")
async def get_leaderboard(store: JsonStore = Depends(default_store)) -> Dict[str, Any]:
    """Load and render the top scores."""

    client = LeaderboardClient(store)
    ok = await client.load()
    return {"ok": ok, **board_payload(client)}


@router.post("/scores")
async def submit_score(
    body: Dict[str, Any] = Body(...), store: JsonStore = Depends(default_store)
) -> Dict[str, Any]:
    """Save a name and score straight to the leaderboard."""

    client = LeaderboardClient(store)
    result = await client.save(body.get("name"), body.get("score"))
    if not result.ok:
        status = 400 if isinstance(result.error, ValidationError) else 502
        raise HTTPException(status, result.message)
    return {"ok": True, "saved": len(result.scores), **board_payload(client)}


__all__ = ["board_payload", "router"]
