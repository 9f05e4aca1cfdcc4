"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rentalops.app import create_app


class FakeSettings:
    calendar_timezone = "America/Chicago"
    default_urgency = "medium"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr("rentalops.service.settings", FakeSettings())
    return TestClient(create_app())


CALENDAR = [
    {"start": "2025-04-25T15:00:00Z", "end": "2025-04-27T15:00:00Z"},
    {"start": "2025-04-28T15:00:00Z", "end": "2025-04-30T15:00:00Z"},
    {"start": "2025-05-02T15:00:00Z", "end": "2025-05-05T15:00:00Z"},
]


# ── Health ──────────────────────────────────────────────────────────


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


# ── POST /api/schedule/suggest ──────────────────────────────────────


class TestSuggestEndpoint:
    def test_medium(self, client):
        resp = client.post(
            "/api/schedule/suggest",
            json={"urgency": "medium", "reservations": CALENDAR, "now": "2025-04-25T15:00:00Z"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"urgency": "medium", "suggestions": ["2025-04-27T19:00:00Z"]}

    def test_high_returns_two_slots(self, client):
        resp = client.post(
            "/api/schedule/suggest",
            json={"urgency": "high", "reservations": [], "now": "2025-04-25T15:00:00Z"},
        )
        assert resp.json()["suggestions"] == ["2025-04-25T15:00:00Z", "2025-04-26T15:00:00Z"]

    def test_missing_urgency_defaults(self, client):
        resp = client.post("/api/schedule/suggest", json={"now": "2025-04-25T15:00:00Z"})
        assert resp.status_code == 200
        assert resp.json() == {"urgency": "medium", "suggestions": ["2025-04-26T17:00:00Z"]}

    def test_timezone_override(self, client):
        resp = client.post(
            "/api/schedule/suggest",
            json={"urgency": "urgent", "now": "2025-04-26T03:30:00Z", "timezone": "UTC"},
        )
        assert resp.json()["suggestions"] == ["2025-04-26T03:30:00Z"]

    def test_without_now_uses_wall_clock(self, client):
        resp = client.post("/api/schedule/suggest", json={"urgency": "low"})
        assert resp.status_code == 200
        assert len(resp.json()["suggestions"]) == 1

    def test_unknown_urgency_is_400(self, client):
        resp = client.post("/api/schedule/suggest", json={"urgency": "critical"})
        assert resp.status_code == 400
        assert "critical" in resp.json()["detail"]

    def test_bad_reservation_is_400(self, client):
        resp = client.post(
            "/api/schedule/suggest",
            json={"urgency": "low", "reservations": [{"start": "not-a-date", "end": "2025-04-27T15:00:00Z"}]},
        )
        assert resp.status_code == 400
        assert "Reservation 0 start" in resp.json()["detail"]

    def test_unknown_timezone_is_400(self, client):
        resp = client.post("/api/schedule/suggest", json={"urgency": "low", "timezone": "Mars/Olympus"})
        assert resp.status_code == 400

    def test_reservation_missing_end_is_422(self, client):
        resp = client.post(
            "/api/schedule/suggest",
            json={"urgency": "low", "reservations": [{"start": "2025-04-25T15:00:00Z"}]},
        )
        assert resp.status_code == 422
