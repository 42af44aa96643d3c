"""Tests for the REST API."""

import importlib

import pytest
from fastapi.testclient import TestClient

from vacation_calculator import api
from vacation_calculator.api import app


@pytest.fixture
def client():
    return TestClient(app)


class TestCalculateEndpoint:
    """Tests for POST /calculate."""

    def test_duration(self, client):
        response = client.post(
            "/calculate",
            json={"start_date": "2024-01-01", "end_date": "2024-01-07", "holidays": ["2024-01-03"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "duration"
        assert data["duration"] == 6
        assert data["calendar_days"] == 7
        assert data["holidays_in_range"] == ["2024-01-03"]
        assert data["summary"] == "Calculated duration: 6 days (inclusive)."

    def test_start_date(self, client):
        response = client.post("/calculate", json={"end_date": "2024-01-10", "duration": 5})

        assert response.status_code == 200
        assert response.json()["start_date"] == "2024-01-06"

    def test_sunday_boundaries(self, client):
        response = client.post(
            "/calculate",
            json={"start_date": "2024-01-07", "duration": "1", "language": "uk"},
        )

        data = response.json()
        assert data["end_date"] == "2024-01-07"
        assert data["sunday_boundaries"] == ["start", "end"]
        assert data["warnings"][0] == "Дата початку (07.01.2024) припадає на неділю."

    def test_unparsable_field_counts_as_missing(self, client):
        response = client.post(
            "/calculate",
            json={"start_date": "garbage", "end_date": "2024-01-07", "duration": 3},
        )

        assert response.status_code == 200
        assert response.json()["start_date"] == "2024-01-05"

    def test_holidays_as_text(self, client):
        response = client.post(
            "/calculate",
            json={"start_date": "2024-01-01", "duration": 2, "holidays": "2024-01-01\n2024-01-02"},
        )

        assert response.json()["end_date"] == "2024-01-04"

    def test_wrong_parameter_count(self, client):
        response = client.post("/calculate", json={"start_date": "2024-01-01"})

        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "wrong_parameter_count"

    def test_start_after_end(self, client):
        response = client.post(
            "/calculate", json={"start_date": "2024-02-01", "end_date": "2024-01-31"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "start_after_end"

    def test_negative_duration(self, client):
        response = client.post("/calculate", json={"end_date": "2024-01-31", "duration": -2})

        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "non_positive_duration"


class TestOtherEndpoints:
    """Tests for the remaining endpoints."""

    def test_parse_holidays(self, client):
        response = client.post("/holidays/parse", json={"text": "2024-05-01, x, 2024-01-01"})

        assert response.json() == {"count": 2, "holidays": ["2024-01-01", "2024-05-01"]}

    def test_root_and_health(self, client):
        assert "POST /calculate" in client.get("/").json()["endpoints"]
        assert client.get("/health").json()["status"] == "healthy"


@pytest.fixture
def reload_api(monkeypatch):
    """Reload the API module against a given holiday file setting."""

    def _reload(holiday_file):
        monkeypatch.setenv("VACATION_CALC_HOLIDAYS_FILE", str(holiday_file))
        return TestClient(importlib.reload(api).app)

    yield _reload

    monkeypatch.delenv("VACATION_CALC_HOLIDAYS_FILE", raising=False)
    importlib.reload(api)


class TestConfiguredHolidayFile:
    """The holiday file from the configuration applies to every request."""

    def test_configured_holidays_are_skipped(self, reload_api, tmp_path):
        holiday_file = tmp_path / "holidays.txt"
        holiday_file.write_text("2024-01-03\n", encoding="utf-8")
        client = reload_api(holiday_file)

        response = client.post("/calculate", json={"start_date": "2024-01-01", "end_date": "2024-01-07"})

        assert response.json()["duration"] == 6

    def test_missing_file_still_starts(self, reload_api, tmp_path):
        client = reload_api(tmp_path / "missing.txt")

        assert client.get("/health").json()["status"] == "healthy"
        response = client.post("/calculate", json={"start_date": "2024-01-01", "end_date": "2024-01-07"})
        assert response.json()["duration"] == 7

    def test_undecodable_file_still_starts(self, reload_api, tmp_path):
        holiday_file = tmp_path / "holidays.txt"
        holiday_file.write_bytes(b"\xff\xfe\x80")

        assert reload_api(holiday_file).get("/health").status_code == 200
