"""
Tests for the analytics and catalog HTTP endpoints.
"""

import datetime

import pytest
from fastapi.testclient import TestClient

from recovery_engine.main import app

NOW = datetime.datetime(2026, 2, 8, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def client():
    return TestClient(app)


def _iso(dt: datetime.datetime) -> str:
    return dt.isoformat()


def _hrv_payload(values: list[float]) -> list[dict]:
    n = len(values)
    return [
        {"value": v, "date": _iso(NOW - datetime.timedelta(days=n - 1 - i))}
        for i, v in enumerate(values)
    ]


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info_keys(self, client):
        data = client.get("/info").json()
        assert set(data) == {"project_name", "version", "authors", "project_url"}


class TestModifiersEndpoint:

    def test_no_data_is_neutral(self, client):
        response = client.post("/api/v1/analytics/modifiers", json={})
        assert response.status_code == 200
        assert response.json() == {"sleep_modifier": 1.0, "readiness_modifier": 1.0}

    def test_stage_with_mixed_dates_rejected(self, client):
        stages = [{"stage": "core", "start": "2026-02-07T23:00:00", "end": "2026-02-08T06:00:00Z"}]
        response = client.post("/api/v1/analytics/modifiers", json={"sleep_stages": stages})
        assert response.status_code == 422

    def test_long_sleep(self, client):
        start = NOW - datetime.timedelta(hours=9)
        stages = [
            {"stage": "core", "start": _iso(start), "end": _iso(start + datetime.timedelta(hours=8))},
        ]
        response = client.post("/api/v1/analytics/modifiers", json={"sleep_stages": stages})
        assert response.json()["sleep_modifier"] == pytest.approx(1.05)


class TestFatigueEndpoint:

    def test_chest_scenario(self, client):
        body = {
            "reference_date": _iso(NOW),
            "muscles": ["chest"],
            "records": [{
                "date": _iso(NOW - datetime.timedelta(hours=24)),
                "primary_muscles": ["chest"],
                "completed_set_count": 5,
                "total_weight_kg": 100,
                "total_reps": 25,
            }],
        }
        response = client.post("/api/v1/analytics/fatigue", json=body)
        assert response.status_code == 200
        [score] = response.json()
        assert score["muscle"] == "chest"
        assert score["normalized_score"] == pytest.approx(0.0232, abs=1e-4)
        assert score["level"] == 1

    def test_defaults_to_all_muscles(self, client):
        response = client.post("/api/v1/analytics/fatigue", json={"reference_date": _iso(NOW)})
        assert len(response.json()) == 13

    def test_mixed_naive_and_aware_dates_rejected(self, client):
        body = {
            "reference_date": "2026-02-08T12:00:00",
            "records": [{"date": "2026-02-07T12:00:00Z", "primary_muscles": ["chest"], "completed_set_count": 3}],
        }
        response = client.post("/api/v1/analytics/fatigue", json=body)
        assert response.status_code == 422
        assert "timezone-aware" in response.text

    def test_all_naive_dates_accepted(self, client):
        body = {
            "reference_date": "2026-02-08T12:00:00",
            "records": [{"date": "2026-02-07T12:00:00", "primary_muscles": ["chest"], "completed_set_count": 3}],
        }
        assert client.post("/api/v1/analytics/fatigue", json=body).status_code == 200

    def test_negative_sets_rejected(self, client):
        body = {
            "reference_date": _iso(NOW),
            "records": [{"date": _iso(NOW), "completed_set_count": -1}],
        }
        assert client.post("/api/v1/analytics/fatigue", json=body).status_code == 422


class TestConditionEndpoint:

    def test_not_ready(self, client):
        response = client.post("/api/v1/analytics/condition", json={"hrv_samples": _hrv_payload([50] * 6)})
        data = response.json()
        assert data["score"] is None
        assert data["baseline_status"]["days_collected"] == 6

    def test_score(self, client):
        response = client.post("/api/v1/analytics/condition", json={"hrv_samples": _hrv_payload([50] * 7)})
        data = response.json()
        assert data["score"]["score"] == 50
        assert data["score"]["status"] == "fair"


class TestRecommendationEndpoint:

    def test_fresh_user(self, client):
        response = client.post("/api/v1/analytics/recommendation", json={"reference_date": _iso(NOW)})
        data = response.json()
        assert response.status_code == 200
        assert len(data["exercises"]) == 4
        assert len(data["focus_muscles"]) == 3

    def test_restricted_catalog(self, client):
        body = {"reference_date": _iso(NOW), "exercise_ids": ["bench_press", "back_squat"]}
        data = client.post("/api/v1/analytics/recommendation", json=body).json()
        ids = {e["definition"]["id"] for e in data["exercises"]}
        assert ids <= {"bench_press", "back_squat"}

    def test_unknown_exercise_is_404(self, client):
        body = {"reference_date": _iso(NOW), "exercise_ids": ["no_such_exercise"]}
        assert client.post("/api/v1/analytics/recommendation", json=body).status_code == 404

    def test_mixed_naive_and_aware_dates_rejected(self, client):
        body = {
            "reference_date": _iso(NOW),
            "records": [{"date": "2026-02-07T12:00:00", "primary_muscles": ["back"], "completed_set_count": 3}],
        }
        assert client.post("/api/v1/analytics/recommendation", json=body).status_code == 422

    def test_missing_reference_date(self, client):
        assert client.post("/api/v1/analytics/recommendation", json={}).status_code == 422


class TestWellnessEndpoint:

    def test_empty_is_null(self, client):
        response = client.post("/api/v1/analytics/wellness", json={})
        assert response.status_code == 200
        assert response.json() is None

    def test_components(self, client):
        body = {"sleep_score": 80, "condition_score": 60}
        data = client.post("/api/v1/analytics/wellness", json=body).json()
        assert data["score"] == 71
        assert data["status"] == "good"


class TestCatalogEndpoint:

    def test_list_by_muscle(self, client):
        data = client.get("/api/v1/exercises", params={"muscle": "calves"}).json()
        assert data
        assert all(
            "calves" in e["primary_muscles"] + e["secondary_muscles"] for e in data
        )

    def test_get_one(self, client):
        assert client.get("/api/v1/exercises/bench_press").json()["name"] == "Barbell Bench Press"

    def test_get_unknown(self, client):
        assert client.get("/api/v1/exercises/nope").status_code == 404
