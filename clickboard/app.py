"""FastAPI application factory and configuration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    SECRET_KEY,
    configure_logging,
)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Clickboard", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SECRET_KEY,
        session_cookie="sid",
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("clickboard.app:app", host="127.0.0.1", port=8000, reload=True)
