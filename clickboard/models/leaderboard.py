"""Rendered leaderboard rows."""

from __future__ import annotations

from typing import Union

from sqlmodel import SQLModel


class LeaderboardRow(SQLModel):
    """A single line of the visible leaderboard."""

    rank: int
    name: str
    score: Union[int, float]

    @property
    def text(self) -> str:
        return f"#{self.rank} {self.name} - {self.score} Points"


__all__ = ["LeaderboardRow"]
