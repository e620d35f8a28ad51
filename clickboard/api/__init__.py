"""HTTP surface: the game page, leaderboard and game endpoints."""

from __future__ import annotations

from fastapi import FastAPI

from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
