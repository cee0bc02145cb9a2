"""Tests for the equity and config HTTP endpoints."""

from pathlib import Path
import sys

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))
from meeting_equity.main import app  # noqa: E402

client = TestClient(app)

UMA = {"id": "p_utc", "name": "Uma", "timezone": "UTC", "country_code": "GB"}
DIEGO = {
    "id": "p_ny",
    "name": "Diego",
    "timezone": "America/New_York",
    "country_code": "US",
}


def test_evaluate_scores_proposal():
    response = client.post(
        "/equity/evaluate",
        json={
            "proposed_time": "2025-03-04T13:00:00Z",
            "duration_minutes": 60,
            "participants": [UMA, DIEGO],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert [s["status"] for s in body["statuses"]] == ["green", "orange"]
    assert body["score"] == 80
    assert body["breakdown"] == {
        "green": 1,
        "orange": 1,
        "red": 0,
        "critical": 0,
        "total": 2,
    }
    assert body["quality"] == "Excellent"
    assert body["severity"] == "favorable"


def test_evaluate_with_holiday_and_override():
    response = client.post(
        "/equity/evaluate",
        json={
            "proposed_time": "2025-07-04T14:00:00Z",
            "participants": [UMA, DIEGO],
            "configs": [{"country_code": "GB", "green_start": "15:00",
                         "green_end": "19:00", "orange_morning_start": "14:00",
                         "orange_morning_end": "15:00",
                         "orange_evening_start": "19:00",
                         "orange_evening_end": "20:00"}],
            "holidays": [
                {"country_code": "US", "date": "2025-07-04",
                 "name": "Independence Day"}
            ],
        },
    )

    assert response.status_code == 200
    uma, diego = response.json()["statuses"]
    assert uma["status"] == "orange"
    assert diego["status"] == "critical"
    assert diego["is_critical"] is True
    assert diego["reason"] == "Holiday: Independence Day"
    assert diego["holiday"] == "Independence Day"
    assert response.json()["score"] == 30


def test_evaluate_rejects_naive_time():
    response = client.post(
        "/equity/evaluate",
        json={"proposed_time": "2025-03-04T13:00:00", "participants": [UMA]},
    )
    assert response.status_code == 422
    assert response.json()["field"] == "proposed_time"


def test_evaluate_rejects_unknown_timezone():
    lost = dict(UMA, timezone="Mars/Olympus")
    response = client.post(
        "/equity/evaluate",
        json={"proposed_time": "2025-03-04T13:00:00Z", "participants": [lost]},
    )
    assert response.status_code == 422
    assert response.json() == {
        "type": "invalid_input",
        "message": "Invalid timezone: Mars/Olympus",
        "field": "timezone",
    }


def test_evaluate_requires_participants_and_sane_duration():
    empty = client.post(
        "/equity/evaluate",
        json={"proposed_time": "2025-03-04T13:00:00Z", "participants": []},
    )
    too_long = client.post(
        "/equity/evaluate",
        json={
            "proposed_time": "2025-03-04T13:00:00Z",
            "duration_minutes": 600,
            "participants": [UMA],
        },
    )
    assert empty.status_code == 422
    assert too_long.status_code == 422


def test_evaluate_rejects_invalid_override():
    response = client.post(
        "/equity/evaluate",
        json={
            "proposed_time": "2025-03-04T13:00:00Z",
            "participants": [UMA],
            "configs": [{"country_code": "GB", "green_start": "18:00",
                         "green_end": "17:00"}],
        },
    )
    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "invalid_config"
    assert body["errors"]["green_end"] == "Start time must be before end time"


def test_heatmap_returns_full_day():
    response = client.post(
        "/equity/heatmap", json={"date": "2025-03-04", "participants": [UMA]}
    )

    assert response.status_code == 200
    slots = response.json()["slots"]
    assert len(slots) == 24
    assert slots[10]["score"] == 100
    assert slots[10]["quality"] == "Excellent"
    assert slots[2]["quality"] == "Poor"


def test_suggestions_default_and_custom_limit():
    payload = {"date": "2025-03-04", "participants": [UMA, DIEGO]}

    default = client.post("/equity/suggestions", json=payload)
    two = client.post("/equity/suggestions", json=dict(payload, limit=2))

    assert [s["hour"] for s in default.json()["slots"]] == [14, 15, 16]
    assert [s["hour"] for s in two.json()["slots"]] == [14, 15]


def test_validate_config_form():
    response = client.post(
        "/configs/validate",
        json={
            "country_code": "US",
            "green_start": "18:00",
            "green_end": "17:00",
            "orange_morning_start": "08:00",
            "orange_morning_end": "09:00",
            "orange_evening_start": "17:00",
            "orange_evening_end": "18:00",
            "work_days": [1, 2, 3, 4, 5],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["errors"]["green_start"] == "Start time must be before end time"


def test_validate_empty_form():
    response = client.post("/configs/validate", json={})
    errors = response.json()["errors"]
    assert errors["country_code"] == "Please select a country"
    assert errors["work_days"] == "Please select at least one working day"


def test_validate_form_time_with_offset():
    response = client.post(
        "/configs/validate",
        json={
            "country_code": "US",
            "green_start": "09:00",
            "green_end": "17:00+01",
            "orange_morning_start": "08:00",
            "orange_morning_end": "09:00",
            "orange_evening_start": "17:00",
            "orange_evening_end": "18:00",
            "work_days": [1, 2, 3, 4, 5],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["errors"] == {"green_end": "Invalid time format"}


def test_evaluate_rejects_override_time_with_offset():
    response = client.post(
        "/equity/evaluate",
        json={
            "proposed_time": "2025-03-04T10:00:00Z",
            "participants": [UMA],
            "configs": [{"country_code": "GB", "green_end": "17:00+01:00"}],
        },
    )

    assert response.status_code == 422
    assert response.json()["errors"] == {"green_end": "Invalid time format"}
