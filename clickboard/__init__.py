"""Click-counter game with a shared online leaderboard."""

__version__ = "0.1.0"
