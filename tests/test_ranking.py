import pytest

from clickboard.core.errors import MalformedDataError
from clickboard.services.ranking import (
    extract_scores,
    merge_score,
    score_value,
    sort_scores,
    top_scores,
)
from tests.support import record


def test_sort_is_descending_by_score():
    records = [record("a", 1), record("b", 9), record("c", 5)]
    assert [r["name"] for r in sort_scores(records)] == ["b", "c", "a"]


def test_equal_scores_rank_earlier_timestamp_first():
    later = record("A", 5, seconds=60)
    earlier = record("B", 5, seconds=0)
    assert [r["name"] for r in sort_scores([later, earlier])] == ["B", "A"]


def test_sorting_is_idempotent():
    records = [record(f"p{i}", (i * 7) % 5, seconds=(i * 13) % 11) for i in range(30)]
    once = sort_scores(records)
    assert sort_scores(once) == once


def test_sort_does_not_mutate_input():
    records = [record("a", 1), record("b", 2)]
    sort_scores(records)
    assert [r["name"] for r in records] == ["a", "b"]


def test_non_numeric_score_ranks_as_zero():
    records = [{"name": "x", "score": "lots", "timestamp": "2024-05-01T00:00:00.000Z"}, record("y", 1)]
    assert [r["name"] for r in sort_scores(records)] == ["y", "x"]
    assert score_value({"score": True}) == 0
    assert score_value("not a record") == 0


def test_unreadable_timestamp_ranks_after_readable_ones():
    records = [{"name": "broken", "score": 3, "timestamp": "yesterday"}, record("ok", 3, seconds=500)]
    assert [r["name"] for r in sort_scores(records)] == ["ok", "broken"]


def test_top_scores_truncates():
    records = [record(f"p{i}", i) for i in range(20)]
    top = top_scores(records, 10)
    assert len(top) == 10
    assert top[0]["score"] == 19
    assert top[-1]["score"] == 10


@pytest.mark.parametrize("document", [{}, {"scores": None}, {"scores": {"a": 1}}, [], None, "text"])
def test_extract_scores_defaults_to_empty(document):
    assert extract_scores(document) == []


def test_extract_scores_strict_raises():
    with pytest.raises(MalformedDataError):
        extract_scores({"scores": "nope"}, strict=True)


def test_merge_score_keeps_other_fields():
    document = {"title": "Season 1", "scores": [record("old", 3, extra="kept")]}
    updated = merge_score(document, record("new", 4, seconds=10), max_entries=100)
    assert updated["title"] == "Season 1"
    assert [r["name"] for r in updated["scores"]] == ["new", "old"]
    assert updated["scores"][1]["extra"] == "kept"
    assert len(document["scores"]) == 1


def test_merge_score_drops_lowest_ranked_beyond_limit():
    existing = [record(f"p{i}", i, seconds=i) for i in range(150)]
    updated = merge_score({"scores": existing}, record("champ", 1000, seconds=999), max_entries=100)
    scores = updated["scores"]
    assert len(scores) == 100
    assert scores[0]["name"] == "champ"
    kept = {r["name"] for r in scores}
    dropped = {f"p{i}" for i in range(51)}
    assert kept.isdisjoint(dropped)
    assert {f"p{i}" for i in range(51, 150)} <= kept


def test_merge_score_writes_non_finite_scores_as_zero():
    document = {"scores": [record("A", float("inf")), record("B", 2)]}
    updated = merge_score(document, record("C", 1, seconds=5), max_entries=100)
    assert [(r["name"], r["score"]) for r in updated["scores"]] == [("B", 2), ("C", 1), ("A", 0)]
