"""View state the leaderboard client renders into."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from ..core.config import MESSAGE_TTL_SECONDS
from ..core.time import utcnow
from ..models import LeaderboardRow

LOADING_TEXT = "Loading scores..."
EMPTY_TEXT = "No scores yet. Be the first!"
ERROR_TEXT = "Error loading scores."


class LeaderboardList:
    """The visible leaderboard: either ranked rows or a single placeholder."""

    def __init__(self) -> None:
        self.rows: List[LeaderboardRow] = []
        self.placeholder: Optional[str] = None

    def replace(self, rows: List[LeaderboardRow]) -> None:
        self.rows = list(rows)
        self.placeholder = None

    def show_placeholder(self, text: str) -> None:
        self.rows = []
        self.placeholder = text

    @property
    def items(self) -> List[str]:
        if self.placeholder is not None:
            return [self.placeholder]
        return [row.text for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": [row.model_dump() for row in self.rows],
            "items": self.items,
            "placeholder": self.placeholder,
        }


@dataclass
class Message:
    text: str
    kind: str
    expires_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "kind": self.kind,
            "expires_at": self.expires_at.isoformat(),
        }


@dataclass
class MessageBoard:
    """Holds at most one transient success or error message."""

    ttl_seconds: float = MESSAGE_TTL_SECONDS
    message: Optional[Message] = field(default=None)

    def show(self, text: str, kind: str = "success", *, now: Optional[datetime] = None) -> Message:
        now = now or utcnow()
        self.message = Message(
            text=text, kind=kind, expires_at=now + timedelta(seconds=self.ttl_seconds)
        )
        return self.message

    def error(self, text: str, *, now: Optional[datetime] = None) -> Message:
        return self.show(text, "error", now=now)

    def clear(self) -> None:
        self.message = None

    def current(self, now: Optional[datetime] = None) -> Optional[Message]:
        """Return the live message, dropping it once it has expired."""

        if self.message is None:
            return None
        if (now or utcnow()) >= self.message.expires_at:
            self.message = None
        return self.message


__all__ = [
    "EMPTY_TEXT",
    "ERROR_TEXT",
    "LOADING_TEXT",
    "LeaderboardList",
    "Message",
    "MessageBoard",
]
