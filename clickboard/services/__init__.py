"""Service layer helpers."""

from .game import Click, EnterName, GameSession, GameState, Submit, Tick, dispatch
from .leaderboard import LeaderboardClient, SaveResult
from .ranking import extract_scores, merge_score, sort_scores, top_scores
from .store import JsonStore, default_store
from .view import LeaderboardList, MessageBoard

__all__ = [
    "Click",
    "EnterName",
    "GameSession",
    "GameState",
    "JsonStore",
    "LeaderboardClient",
    "LeaderboardList",
    "MessageBoard",
    "SaveResult",
    "Submit",
    "Tick",
    "default_store",
    "dispatch",
    "extract_scores",
    "merge_score",
    "sort_scores",
    "top_scores",
]
