"""Click game endpoints.

The game session is kept in the signed session cookie, one game per browser.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from ...core import InvalidTransition, ValidationError, utcnow
from ...services import (
    Click,
    EnterName,
    GameSession,
    JsonStore,
    LeaderboardClient,
    Submit,
    Tick,
    default_store,
    dispatch,
)
from .leaderboard import board_payload

router = APIRouter(prefix="/api/game", tags=["game"])

_SESSION_KEY = "game"


async def _load_session(request: Request) -> GameSession:
    session = GameSession.from_dict(request.session.get(_SESSION_KEY))
    return await dispatch(session, Tick(utcnow()))


def _store_session(request: Request, session: GameSession) -> Dict[str, Any]:
    data = session.to_dict()
    request.session[_SESSION_KEY] = data
    return {
        **data,
        "can_click": session.can_click,
        "can_submit": session.can_submit,
    }


@router.get("")
async def get_game(request: Request) -> Dict[str, Any]:
    """Current game state, after any pending reset has been applied."""

    session = await _load_session(request)
    return _store_session(request, session)


@router.post("/name")
async def enter_name(request: Request, body: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Confirm the player name and start a new game."""

    session = await _load_session(request)
    try:
        await dispatch(session, EnterName(body.get("name") or ""))
    except ValidationError as exc:
        raise HTTPException(400, exc.message) from exc
    except InvalidTransition as exc:
        raise HTTPException(409, exc.message) from exc
    return _store_session(request, session)


@router.post("/click")
async def click(request: Request) -> Dict[str, Any]:
    session = await _load_session(request)
    await dispatch(session, Click())
    return _store_session(request, session)


@router.post("/submit")
async def submit(
    request: Request, store: JsonStore = Depends(default_store)
) -> Dict[str, Any]:
    """End the game and save the click count."""

    session = await _load_session(request)
    client = LeaderboardClient(store)
    try:
        await dispatch(session, Submit(), client=client)
    except InvalidTransition as exc:
        raise HTTPException(409, exc.message) from exc
    payload = _store_session(request, session)
    return {**payload, **board_payload(client)}


__all__ = ["router"]
