"""Tests for the workout REST endpoints."""

from fastapi.testclient import TestClient

from life_tracker.api.app import create_app


def test_kettlebell_endpoints(container) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/api/workouts/kettlebell",
        json={
            "weight": 24,
            "series": 3,
            "reps": 10,
            "singleHanded": False,
            "date": "2024-01-01",
        },
    )
    assert created.status_code == 201
    entry = created.json()
    assert entry["singleHanded"] is False
    assert entry["date"] == "2024-01-01"

    listed = client.get("/api/workouts/kettlebell?date=2024-01-01").json()
    assert [item["id"] for item in listed] == [entry["id"]]

    summary = client.get("/api/workouts/kettlebell/summary?date=2024-01-01").json()
    assert summary == {"total_reps": 30, "total_volume": 1440, "total_entries": 1}

    updated = client.put(
        f"/api/workouts/kettlebell/{entry['id']}", json={"singleHanded": True}
    ).json()
    assert updated["singleHanded"] is True
    assert updated["weight"] == 24

    assert client.delete(f"/api/workouts/kettlebell/{entry['id']}").status_code == 204
    missing = client.delete(f"/api/workouts/kettlebell/{entry['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Entry not found"}


def test_kettlebell_validation(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/workouts/kettlebell", json={"weight": 0, "series": 1, "reps": 1}
    )

    assert response.status_code == 400
    assert "Weight" in response.json()["error"]


def test_pushup_endpoints(container) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/api/workouts/pushups", json={"series": 2, "reps": 15, "date": "2024-01-01"}
    )
    assert created.status_code == 201
    entry_id = created.json()["id"]

    updated = client.put(f"/api/workouts/pushups/{entry_id}", json={"reps": 20})
    assert updated.json()["reps"] == 20

    summary = client.get("/api/workouts/pushups/summary?date=2024-01-01").json()
    assert summary == {"total_reps": 40, "total_entries": 1}
    assert len(client.get("/api/workouts/pushups?date=2024-01-01").json()) == 1
    assert client.delete(f"/api/workouts/pushups/{entry_id}").status_code == 204


def test_daily_summary_and_history(container) -> None:
    client = TestClient(create_app(container))
    client.post(
        "/api/workouts/kettlebell",
        json={"weight": 16, "series": 1, "reps": 10, "date": "2024-01-01"},
    )
    client.post(
        "/api/workouts/pushups", json={"series": 1, "reps": 25, "date": "2024-01-02"}
    )

    timers = client.put(
        "/api/workouts/daily?date=2024-01-01",
        json={"kettlebell_time": 300, "pushup_time": 60},
    )
    assert timers.json() == {
        "date": "2024-01-01",
        "kettlebell_time": 300,
        "pushup_time": 60,
    }
    assert client.get("/api/workouts/daily?date=2024-01-03").json()[
        "kettlebell_time"
    ] == 0

    summary = client.get("/api/workouts/summary?date=2024-01-01").json()
    assert summary["kettlebell_total_volume"] == 320
    assert summary["kettlebell_total_time"] == 300
    assert summary["pushup_entries"] == 0

    history = client.get("/api/workouts/history").json()
    assert history == {
        "kettlebell": {"2024-01-01": {"reps": 10, "volume": 320}},
        "pushups": {"2024-01-02": {"reps": 25}},
    }


def test_negative_timer_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.put("/api/workouts/daily", json={"pushup_time": -5})

    assert response.status_code == 400
