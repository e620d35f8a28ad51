import pytest
from fastapi.testclient import TestClient

from clickboard.app import app
from clickboard.services import default_store
from tests.support import StoreStub, record


@pytest.fixture()
def stub():
    return StoreStub({"scores": [record("A", 5, seconds=60), record("B", 5, seconds=0)]})


@pytest.fixture()
def client(stub):
    app.dependency_overrides[default_store] = stub.store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_config_exposes_no_secrets(client):
    data = client.get("/config").json()
    assert data["display_size"] == 10
    assert data["max_entries"] == 100
    assert "test-master-key" not in str(data)


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "leaderboard-list" in res.text


def test_leaderboard_renders_ranked_items(client):
    data = client.get("/api/leaderboard").json()
    assert data["ok"]
    assert data["leaderboard"]["items"] == ["#1 B - 5 Points", "#2 A - 5 Points"]
    assert data["message"] is None


def test_leaderboard_failure_is_reported_not_raised(client, stub):
    stub.get_status = 500
    res = client.get("/api/leaderboard")
    assert res.status_code == 200
    data = res.json()
    assert not data["ok"]
    assert data["leaderboard"]["items"] == ["Error loading scores."]
    assert data["message"]["kind"] == "error"


def test_submit_score_validation(client, stub):
    res = client.post("/api/scores", json={"name": " ", "score": 4})
    assert res.status_code == 400
    assert res.json()["detail"] == "Please enter a name."

    res = client.post("/api/scores", json={"name": "Cy", "score": -4})
    assert res.status_code == 400
    assert stub.requests == []


def test_submit_score_transport_failure(client, stub):
    stub.put_status = 500
    res = client.post("/api/scores", json={"name": "Cy", "score": 4})
    assert res.status_code == 502


def test_submit_score_success(client, stub):
    res = client.post("/api/scores", json={"name": "Cy", "score": "9"})
    assert res.status_code == 200
    data = res.json()
    assert data["saved"] == 3
    assert data["leaderboard"]["items"][0] == "#1 Cy - 9 Points"
    assert data["message"]["text"] == "Score saved successfully!"


def test_game_flow(client, stub):
    state = client.get("/api/game").json()
    assert state["state"] == "name-entry"
    assert not state["can_click"]

    res = client.post("/api/game/name", json={"name": "Dee"})
    assert res.status_code == 200
    assert res.json()["state"] == "playing"

    for _ in range(6):
        state = client.post("/api/game/click").json()
    assert state["clicks"] == 6

    result = client.post("/api/game/submit").json()
    assert result["state"] == "submitting"
    assert result["outcome_ok"]
    assert result["leaderboard"]["items"][0] == "#1 Dee - 6 Points"
    assert stub.document["scores"][0]["name"] == "Dee"

    state = client.get("/api/game").json()
    assert state["state"] == "name-entry"
    assert state["clicks"] == 0


def test_game_rejects_blank_name(client):
    res = client.post("/api/game/name", json={"name": ""})
    assert res.status_code == 400


def test_game_submit_without_name_conflicts(client):
    res = client.post("/api/game/submit")
    assert res.status_code == 409


def test_game_second_name_conflicts(client):
    client.post("/api/game/name", json={"name": "Dee"})
    res = client.post("/api/game/name", json={"name": "Eve"})
    assert res.status_code == 409


def test_only_one_health_route(client):
    assert client.get("/health").status_code == 200
    assert client.get("/healthz").status_code == 404


def test_leaderboard_with_overflowing_score_still_renders(client, stub):
    stub.document = {"scores": [record("A", float("inf")), record("B", 2.5)]}
    res = client.get("/api/leaderboard")
    assert res.status_code == 200
    assert res.json()["leaderboard"]["items"] == ["#1 B - 2.5 Points", "#2 A - 0 Points"]
    assert "submit_label" not in res.json()


def test_replayed_game_cookie_saves_again(client, stub):
    client.post("/api/game/name", json={"name": "Dee"})
    client.post("/api/game/click")
    before_submit = client.cookies.get("sid")
    assert client.post("/api/game/submit").status_code == 200

    client.cookies.clear()
    res = client.post("/api/game/submit", headers={"cookie": f"sid={before_submit}"})
    assert res.status_code == 200
    assert [entry["name"] for entry in stub.document["scores"]].count("Dee") == 2
