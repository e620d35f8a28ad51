"""Aggregate API routers."""

from fastapi import APIRouter

from .game import router as game_router
from .leaderboard import router as leaderboard_router
from .page import router as page_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    page_router,
    leaderboard_router,
    game_router,
)

__all__ = ["ALL_ROUTERS"]
