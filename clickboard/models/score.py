"""Score record model."""

from __future__ import annotations

from typing import Any, Dict

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import isoformat_z, utcnow


def _timestamp_now() -> str:
    return isoformat_z(utcnow())


class ScoreRecord(SQLModel):
    """One player's name, score and submission timestamp."""

    name: str = ORMField(min_length=1)
    score: int = ORMField(ge=0)
    timestamp: str = ORMField(default_factory=_timestamp_now)

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON shape stored in the leaderboard document."""

        return {"name": self.name, "score": self.score, "timestamp": self.timestamp}


__all__ = ["ScoreRecord"]
