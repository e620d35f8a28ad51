"""Error types shared by the leaderboard client and the game controller."""

from __future__ import annotations

from typing import Optional


class ClickboardError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ClickboardError):
    """Input rejected before any network call was made."""


class TransportError(ClickboardError):
    """Network failure or non-success status from the remote store."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class DocumentNotFound(TransportError):
    """The remote document has not been initialised yet (HTTP 404)."""


class MalformedDataError(ClickboardError):
    """The document's scores field is missing or not a list."""


class InvalidTransition(ClickboardError):
    """A game event arrived in a state that does not accept it."""


__all__ = [
    "ClickboardError",
    "DocumentNotFound",
    "InvalidTransition",
    "MalformedDataError",
    "TransportError",
    "ValidationError",
]
