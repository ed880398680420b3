"""Tests for the JSON API with a real service over mocked weather.gov."""

from pathlib import Path

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from skireport.api import create_app
from skireport.config.schema import SkillConfig

STEVENS_URL = "https://api.weather.gov/gridpoints/SEW/164,66/forecast"


@pytest.fixture
def client(default_config: SkillConfig) -> TestClient:
    return TestClient(create_app(default_config))


@pytest.fixture
def stevens(night_first_forecast: dict):
    with respx.mock(assert_all_called=False) as mock:
        mock.route(host="testserver").pass_through()
        mock.get(STEVENS_URL).mock(
            return_value=httpx.Response(200, json=night_first_forecast)
        )
        yield mock


class TestForecastEndpoints:
    def test_resorts(self, client: TestClient):
        resp = client.get("/api/resorts")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 27
        washington = next(r for r in body if r["id"] == "Mount_Washington")
        assert washington["supported"] is False

    def test_week(self, client: TestClient, stevens):
        resp = client.get("/api/resorts/Stevens_Pass/week")
        assert resp.status_code == 200
        days = resp.json()["days"]
        assert days[0] == {
            "day": "Friday",
            "temp_high": 35,
            "temp_low": 25,
            "short_forecast": "Heavy Snow",
            "detailed_forecast": "Heavy Snow. High near 35. Southwest wind 5 to 10 mph.",
        }

    def test_today(self, client: TestClient, stevens):
        resp = client.get("/api/resorts/Stevens_Pass/today")
        assert resp.status_code == 200
        assert resp.json()["detailed_forecast"].startswith("Snow Showers")

    def test_day(self, client: TestClient, stevens):
        resp = client.get("/api/resorts/Stevens_Pass/day/SUNDAY")
        assert resp.status_code == 200
        assert resp.json()["temp_low"] == 22

    @pytest.mark.parametrize(
        "day, status, error",
        [("caturday", 422, "INVALID_DAY"), ("thursday", 404, "NO_DATA_FOR_DAY")],
    )
    def test_day_errors(self, client: TestClient, stevens, day: str, status: int, error: str):
        resp = client.get(f"/api/resorts/Stevens_Pass/day/{day}")
        assert resp.status_code == status
        assert resp.json()["detail"]["error"] == error

    def test_not_supported(self, client: TestClient):
        resp = client.get("/api/resorts/Mount_Washington/week")
        assert resp.status_code == 404
        assert resp.json()["detail"]["error"] == "NOT_SUPPORTED"

    def test_upstream_failure(self, client: TestClient):
        with respx.mock(assert_all_called=False) as mock:
            mock.route(host="testserver").pass_through()
            mock.get(STEVENS_URL).mock(return_value=httpx.Response(503))
            resp = client.get("/api/resorts/Stevens_Pass/today")
        assert resp.status_code == 502
        assert resp.json()["detail"]["error"] == "TERMINAL_ERROR"


class TestStats:
    def test_requests_counted(self, client: TestClient, stevens):
        client.get("/api/resorts/Stevens_Pass/week")
        client.get("/api/resorts/Stevens_Pass/today")
        client.get("/api/resorts/Mount_Washington/week")

        resp = client.get("/api/stats")
        assert resp.status_code == 200
        assert [(r["resort"], r["resort_counter"]) for r in resp.json()] == [
            ("Stevens_Pass", 2),
            ("Mount_Washington", 1),
        ]

    def test_tracking_disabled(self, tmp_path: Path):
        config = SkillConfig(
            storage={"db_path": str(tmp_path / "x.db"), "track_resorts": False}
        )
        client = TestClient(create_app(config))
        client.get("/api/resorts/Whistler/week")
        assert client.get("/api/stats").json() == []


class TestIntent:
    def test_week_intent(self, client: TestClient, stevens):
        slots = {
            "Resort": {
                "value": "stevens",
                "resolutions": {
                    "resolutionsPerAuthority": [
                        {
                            "status": {"code": "ER_SUCCESS_MATCH"},
                            "values": [{"value": {"id": "Stevens_Pass", "name": "Stevens Pass"}}],
                        }
                    ]
                },
            }
        }
        resp = client.post("/api/intent", json={"intent": "ForecastWeekIntent", "slots": slots})

        assert resp.status_code == 200
        body = resp.json()
        assert body["speech"].startswith("Here is the forecast for Stevens Pass")
        assert body["end_session"] is True

    def test_unresolved_resort_counted_by_synonym(self, client: TestClient):
        resp = client.post(
            "/api/intent",
            json={"intent": "ForecastTodayIntent", "slots": {"Resort": {"value": "whistler"}}},
        )
        assert resp.json()["reprompt"] is not None
        assert client.get("/api/stats").json()[0]["resort"] == "whistler"

    def test_launch(self, client: TestClient):
        resp = client.post("/api/intent", json={"intent": "LaunchRequest"})
        assert resp.json()["end_session"] is False
