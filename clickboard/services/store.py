"""Remote JSON document store client.

The leaderboard lives in a single JSON document reached with two calls: a GET
that returns the whole document and a PUT that overwrites it. There is no
version token, so two clients saving at the same time race and the later PUT
wins. Game state rides in a signed but replayable session cookie, so a client
that resends a pre-submit cookie can save the same game twice; this grants
nothing beyond what `POST /api/scores` already allows.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import (
    LEADERBOARD_MASTER_KEY,
    LEADERBOARD_STORE_URL,
    STORE_TIMEOUT_SECONDS,
)
from ..core.errors import DocumentNotFound, TransportError

logger = logging.getLogger(__name__)


class JsonStore:
    """Reads and overwrites one JSON document on the remote store."""

    def __init__(
        self,
        url: str,
        master_key: str,
        *,
        timeout: float = STORE_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.master_key = master_key
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def fetch(self) -> Any:
        """GET the document body without store metadata."""

        headers = {"X-Master-Key": self.master_key, "X-Bin-Meta": "false"}
        try:
            async with self._client() as client:
                response = await client.get(self.url, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Network error reading leaderboard document: %s", exc)
            raise TransportError(f"Network error: {exc}") from exc

        if response.status_code == 404:
            raise DocumentNotFound(
                "Leaderboard document not found", status_code=404, detail=response.text
            )
        if not response.is_success:
            logger.error(
                "Failed to read leaderboard document: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            raise TransportError(
                f"Store returned {response.status_code}",
                status_code=response.status_code,
                detail=response.text,
            )

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Leaderboard document is not valid JSON: %s", exc)
            raise TransportError(
                "Store returned a body that is not JSON",
                status_code=response.status_code,
                detail=response.text,
            ) from exc

    async def replace(self, document: Dict[str, Any]) -> None:
        """PUT ``document`` as the new full content of the remote document."""

        headers = {
            "X-Master-Key": self.master_key,
            "Content-Type": "application/json",
        }
        try:
            async with self._client() as client:
                response = await client.put(self.url, headers=headers, json=document)
        except httpx.HTTPError as exc:
            logger.error("Network error writing leaderboard document: %s", exc)
            raise TransportError(f"Network error: {exc}") from exc

        if not response.is_success:
            logger.error(
                "Failed to write leaderboard document: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            logger.error("Store error details: %s", response.text)
            raise TransportError(
                f"Store returned {response.status_code}",
                status_code=response.status_code,
                detail=response.text,
            )


def default_store() -> JsonStore:
    """Build a store client from the environment configuration."""

    return JsonStore(LEADERBOARD_STORE_URL, LEADERBOARD_MASTER_KEY)


__all__ = ["JsonStore", "default_store"]
