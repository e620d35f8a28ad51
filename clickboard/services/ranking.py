"""Ranking order for score records.

Records are ranked by descending score, with ties broken by ascending
timestamp so the earlier submission wins. Records read back from the store are
plain dicts and may be incomplete; a score that is not a finite number ranks
as 0 and an unreadable timestamp ranks after every readable one with the same
score.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, Tuple

from ..core.errors import MalformedDataError
from ..core.time import parse_timestamp

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def score_value(record: Any) -> float:
    """Return the numeric score of a stored record, 0 when absent or invalid."""

    if not isinstance(record, dict):
        return 0
    score = record.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return 0
    if not math.isfinite(score):
        return 0
    return score


def ranking_key(record: Any) -> Tuple[float, bool, datetime]:
    timestamp = None
    if isinstance(record, dict):
        timestamp = parse_timestamp(record.get("timestamp"))
    return (-score_value(record), timestamp is None, timestamp or _EPOCH)


def sort_scores(records: Sequence[Any]) -> List[Any]:
    """Return a new list sorted by ranking order. The sort is stable."""

    return sorted(records, key=ranking_key)


def top_scores(records: Sequence[Any], limit: int) -> List[Any]:
    """Sort ``records`` and keep the best ``limit`` entries."""

    return sort_scores(records)[:limit]


def extract_scores(document: Any, *, strict: bool = False) -> List[Any]:
    """Pull the ``scores`` list out of a leaderboard document.

    A missing or non-list field yields an empty list, unless ``strict`` is set,
    in which case :class:`MalformedDataError` is raised instead.
    """

    scores = document.get("scores") if isinstance(document, dict) else None
    if isinstance(scores, list):
        return list(scores)
    if strict:
        raise MalformedDataError("Leaderboard document has no scores list")
    return []


def _finite(record: Any) -> Any:
    score = record.get("score") if isinstance(record, dict) else None
    if isinstance(score, float) and not math.isfinite(score):
        return {**record, "score": 0}
    return record


def merge_score(
    document: Any, record: Dict[str, Any], *, max_entries: int
) -> Dict[str, Any]:
    """Return a copy of ``document`` with ``record`` ranked into its scores.

    Every other top-level field is carried over untouched. Stored scores that
    are not finite numbers are written back as 0, the value they rank as,
    since JSON cannot carry them.
    """

    updated: Dict[str, Any] = dict(document) if isinstance(document, dict) else {}
    scores = [_finite(entry) for entry in extract_scores(updated)]
    scores.append(record)
    updated["scores"] = top_scores(scores, max_entries)
    return updated


__all__ = [
    "extract_scores",
    "merge_score",
    "ranking_key",
    "score_value",
    "sort_scores",
    "top_scores",
]
