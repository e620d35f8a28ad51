"""Click game state machine.

A game cycles ``name-entry -> playing -> submitting -> name-entry``. All
transitions go through :func:`dispatch`, which mutates the given
:class:`GameSession` and, on submit, calls the leaderboard client once.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from ..core.config import RESET_DELAY_SECONDS
from ..core.errors import InvalidTransition
from ..core.time import utcnow
from .leaderboard import LeaderboardClient, SaveResult, validate_name

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    NAME_ENTRY = "name-entry"
    PLAYING = "playing"
    SUBMITTING = "submitting"


@dataclass
class EnterName:
    name: str


@dataclass
class Click:
    pass


@dataclass
class Submit:
    pass


@dataclass
class Tick:
    now: datetime


GameEvent = Union[EnterName, Click, Submit, Tick]


@dataclass
class GameSession:
    """Per-tab game context."""

    state: GameState = GameState.NAME_ENTRY
    player_name: str = ""
    clicks: int = 0
    reset_at: Optional[datetime] = None
    outcome: Optional[str] = None
    outcome_ok: Optional[bool] = None

    @property
    def can_click(self) -> bool:
        return self.state is GameState.PLAYING

    @property
    def can_submit(self) -> bool:
        return self.state is GameState.PLAYING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "player_name": self.player_name,
            "clicks": self.clicks,
            "reset_at": self.reset_at.isoformat() if self.reset_at else None,
            "outcome": self.outcome,
            "outcome_ok": self.outcome_ok,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GameSession":
        if not data:
            return cls()
        try:
            state = GameState(data.get("state", GameState.NAME_ENTRY.value))
        except ValueError:
            return cls()
        reset_at = data.get("reset_at")
        return cls(
            state=state,
            player_name=data.get("player_name") or "",
            clicks=int(data.get("clicks") or 0),
            reset_at=datetime.fromisoformat(reset_at) if reset_at else None,
            outcome=data.get("outcome"),
            outcome_ok=data.get("outcome_ok"),
        )


def _reset(session: GameSession) -> None:
    session.state = GameState.NAME_ENTRY
    session.player_name = ""
    session.clicks = 0
    session.reset_at = None


async def dispatch(
    session: GameSession,
    event: GameEvent,
    *,
    client: Optional[LeaderboardClient] = None,
    now: Optional[datetime] = None,
    reset_delay: float = RESET_DELAY_SECONDS,
) -> GameSession:
    """Apply ``event`` to ``session`` and return it.

    Clicks outside ``playing`` and repeated submits while ``submitting`` are
    ignored, as a disabled control would ignore them. Other events that the
    current state does not accept raise :class:`InvalidTransition`.
    """

    if isinstance(event, Tick):
        if (
            session.state is GameState.SUBMITTING
            and session.reset_at is not None
            and event.now >= session.reset_at
        ):
            _reset(session)
        return session

    if isinstance(event, Click):
        if session.state is GameState.PLAYING:
            session.clicks += 1
        return session

    if isinstance(event, EnterName):
        if session.state is not GameState.NAME_ENTRY:
            raise InvalidTransition(f"Cannot start a game while {session.state.value}")
        session.player_name = validate_name(event.name)
        session.clicks = 0
        session.outcome = None
        session.outcome_ok = None
        session.state = GameState.PLAYING
        return session

    if isinstance(event, Submit):
        if session.state is GameState.SUBMITTING:
            return session
        if session.state is not GameState.PLAYING:
            raise InvalidTransition("No game in progress")
        if client is None:
            raise ValueError("A leaderboard client is required to submit")

        session.state = GameState.SUBMITTING
        result: SaveResult = await client.save(session.player_name, session.clicks)
        session.outcome = result.message
        session.outcome_ok = result.ok
        session.reset_at = (now or utcnow()) + timedelta(seconds=reset_delay)
        logger.info(
            "Game over for %s with %s clicks (saved=%s)",
            session.player_name,
            session.clicks,
            result.ok,
        )
        return session

    raise InvalidTransition(f"Unknown event {event!r}")


__all__ = [
    "Click",
    "EnterName",
    "GameEvent",
    "GameSession",
    "GameState",
    "Submit",
    "Tick",
    "dispatch",
]
