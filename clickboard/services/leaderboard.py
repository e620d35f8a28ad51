"""Leaderboard load and save against the remote document store."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from ..core.config import LEADERBOARD_DISPLAY_SIZE, LEADERBOARD_MAX_ENTRIES
from ..core.errors import (
    ClickboardError,
    DocumentNotFound,
    TransportError,
    ValidationError,
)
from ..core.time import isoformat_z, utcnow
from ..models import LeaderboardRow, ScoreRecord
from .ranking import extract_scores, merge_score, score_value, top_scores
from .store import JsonStore
from .view import EMPTY_TEXT, ERROR_TEXT, LOADING_TEXT, LeaderboardList, MessageBoard

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

SAVED_MESSAGE = "Score saved successfully!"
NAME_REQUIRED_MESSAGE = "Please enter a name."
INVALID_SCORE_MESSAGE = "Please enter a valid positive score."
READ_FAILED_MESSAGE = "Failed to get current scores. Cannot save."
SAVE_FAILED_MESSAGE = "Failed to save score."
SAVE_NETWORK_MESSAGE = "Network error saving score. Check your connection."
LOAD_FAILED_MESSAGE = "Failed to load scores."
LOAD_NETWORK_MESSAGE = "Network error loading scores. Check your connection."


def validate_name(name: Any) -> str:
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise ValidationError(NAME_REQUIRED_MESSAGE)
    return cleaned


def validate_score(score: Any) -> int:
    """Accept a non-negative int or a string of digits."""

    if isinstance(score, bool):
        raise ValidationError(INVALID_SCORE_MESSAGE)
    if isinstance(score, int):
        value = score
    elif isinstance(score, str) and _DIGITS.fullmatch(score.strip()):
        value = int(score.strip())
    else:
        raise ValidationError(INVALID_SCORE_MESSAGE)
    if value < 0:
        raise ValidationError(INVALID_SCORE_MESSAGE)
    return value


def _display_score(score: float) -> Union[int, float]:
    if isinstance(score, float) and score.is_integer():
        return int(score)
    return score


def render_rows(records: List[Any]) -> List[LeaderboardRow]:
    rows = []
    for index, record in enumerate(records):
        name = record.get("name") if isinstance(record, dict) else None
        rows.append(
            LeaderboardRow(
                rank=index + 1,
                name=str(name) if name else "Unknown",
                score=_display_score(score_value(record)),
            )
        )
    return rows


@dataclass
class SaveResult:
    ok: bool
    message: str
    scores: List[Any] = field(default_factory=list)
    error: Optional[ClickboardError] = None


class LeaderboardClient:
    """Loads the ranked leaderboard and saves new scores into it.

    Results are rendered into ``target`` and user-facing outcomes are posted
    to ``messages``. Every failure is logged and surfaced there; nothing is
    retried and nothing propagates to the caller.

    ``saving`` only blocks overlapping saves on this instance; the HTTP layer
    builds one client per request.
    """

    def __init__(
        self,
        store: JsonStore,
        *,
        target: Optional[LeaderboardList] = None,
        messages: Optional[MessageBoard] = None,
        display_size: int = LEADERBOARD_DISPLAY_SIZE,
        max_entries: int = LEADERBOARD_MAX_ENTRIES,
        clock: Callable = utcnow,
    ) -> None:
        self.store = store
        self.target = target if target is not None else LeaderboardList()
        self.messages = messages if messages is not None else MessageBoard()
        self.display_size = display_size
        self.max_entries = max_entries
        self.clock = clock
        self.saving = False

    async def load(self, target: Optional[LeaderboardList] = None) -> bool:
        """Render the top scores into ``target``. Returns False on failure."""

        target = target if target is not None else self.target
        target.show_placeholder(LOADING_TEXT)

        try:
            document = await self.store.fetch()
        except TransportError as exc:
            logger.error("Error loading scores: %s", exc.message)
            text = LOAD_NETWORK_MESSAGE if exc.status_code is None else LOAD_FAILED_MESSAGE
            self.messages.error(text, now=self.clock())
            target.show_placeholder(ERROR_TEXT)
            return False

        scores = top_scores(extract_scores(document), self.display_size)
        if not scores:
            target.show_placeholder(EMPTY_TEXT)
        else:
            target.replace(render_rows(scores))
        return True

    async def save(self, name: Any, score: Any) -> SaveResult:
        """Validate, read-modify-write the document, then refresh the board."""

        try:
            record = ScoreRecord(
                name=validate_name(name),
                score=validate_score(score),
                timestamp=isoformat_z(self.clock()),
            )
        except ValidationError as exc:
            logger.info("Rejected score submission: %s", exc.message)
            self.messages.error(exc.message, now=self.clock())
            return SaveResult(ok=False, message=exc.message, error=exc)

        if self.saving:
            error = ValidationError("A score is already being saved.")
            return SaveResult(ok=False, message=error.message, error=error)

        self.saving = True
        try:
            return await self._save(record)
        finally:
            self.saving = False

    async def _save(self, record: ScoreRecord) -> SaveResult:
        try:
            document = await self.store.fetch()
        except DocumentNotFound:
            document = {}
        except TransportError as exc:
            logger.error("Failed to retrieve current scores before saving: %s", exc.message)
            text = SAVE_NETWORK_MESSAGE if exc.status_code is None else READ_FAILED_MESSAGE
            self.messages.error(text, now=self.clock())
            return SaveResult(ok=False, message=text, error=exc)

        updated = merge_score(
            document, record.to_document(), max_entries=self.max_entries
        )

        try:
            await self.store.replace(updated)
        except TransportError as exc:
            text = SAVE_NETWORK_MESSAGE if exc.status_code is None else SAVE_FAILED_MESSAGE
            self.messages.error(text, now=self.clock())
            return SaveResult(ok=False, message=text, error=exc)

        logger.info("Saved score %s for %s", record.score, record.name)
        self.messages.show(SAVED_MESSAGE, now=self.clock())
        await self.load()
        return SaveResult(ok=True, message=SAVED_MESSAGE, scores=updated["scores"])


__all__ = [
    "LeaderboardClient",
    "SaveResult",
    "render_rows",
    "validate_name",
    "validate_score",
]
