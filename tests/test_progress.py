"""Tests for reading and merging learner progress."""
from conftest import auth_header
from progress.models import UserProgress


def test_defaults_when_nothing_stored(client):
    response = client.get("/progress", headers=auth_header("learner-1"))
    assert response.status_code == 200
    assert response.json() == {"progress": 0, "badges": [], "recentActivity": []}


def test_update_returns_plain_text(client):
    response = client.post(
        "/progress",
        json={"progress": 40, "badges": ["starter"], "recentActivity": [{"lesson": "intro"}]},
        headers=auth_header("learner-1"),
    )
    assert response.status_code == 200
    assert response.text == "Progress updated!"
    assert response.headers["content-type"].startswith("text/plain")


def test_round_trip(client):
    headers = auth_header("learner-1")
    payload = {"progress": 55.5, "badges": ["starter", "streak-7"], "recentActivity": [{"lesson": "loops"}]}
    client.post("/progress", json=payload, headers=headers)
    assert client.get("/progress", headers=headers).json() == payload


def test_partial_update_keeps_other_fields(client):
    headers = auth_header("learner-1")
    client.post(
        "/progress",
        json={"progress": 10, "badges": ["starter"], "recentActivity": ["a"]},
        headers=headers,
    )
    client.post("/progress", json={"progress": 20}, headers=headers)
    assert client.get("/progress", headers=headers).json() == {
        "progress": 20,
        "badges": ["starter"],
        "recentActivity": ["a"],
    }


def test_first_partial_write_fills_zero_values(client):
    headers = auth_header("learner-2")
    client.post("/progress", json={"badges": ["first"]}, headers=headers)
    assert client.get("/progress", headers=headers).json() == {
        "progress": 0,
        "badges": ["first"],
        "recentActivity": [],
    }


def test_update_is_idempotent(client, db):
    headers = auth_header("learner-1")
    payload = {"progress": 70, "badges": ["b"], "recentActivity": []}
    client.post("/progress", json=payload, headers=headers)
    client.post("/progress", json=payload, headers=headers)
    assert db.query(UserProgress).count() == 1
    assert client.get("/progress", headers=headers).json() == payload


def test_progress_is_per_user(client):
    client.post("/progress", json={"progress": 90}, headers=auth_header("learner-1"))
    assert client.get("/progress", headers=auth_header("learner-2")).json()["progress"] == 0
