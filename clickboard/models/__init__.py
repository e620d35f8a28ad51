"""Model exports."""

from .leaderboard import LeaderboardRow
from .score import ScoreRecord

__all__ = [
    "LeaderboardRow",
    "ScoreRecord",
]
