"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from src.presentation.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


WEATHER = [
    {"date": "2025-06-01", "temp_max_c": 30, "temp_min_c": 20},
    {"date": "2025-06-02", "temp_max_c": 32, "temp_min_c": 22},
    {"date": "2025-06-03", "temp_max_c": 28, "temp_min_c": 18},
    {"date": "2025-06-04", "temp_max_c": 30, "temp_min_c": 20},
    {"date": "2025-06-05", "temp_max_c": 31, "temp_min_c": 21},
]


def test_health(client):
    """Test health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client):
    """Test root endpoint lists the forecast route."""
    assert client.get("/").json()["endpoints"]["forecast"] == "/forecast"


def test_forecast_with_inline_weather(client):
    """Test a forecast request with stage counts and weather."""
    response = client.post(
        "/forecast",
        json={
            "stage_counts": {"immature": 10, "pink": 5, "mature": 2},
            "weather": WEATHER,
            "controls": {"avg_weight_g": 100, "num_plants": 1, "forecast_days": 5},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["daily"]) == 5
    assert body["daily"][0]["date"] == "2025-06-01"
    assert [round(p["gdd_cum"]) for p in body["daily"]] == [15, 32, 45, 60, 76]
    assert body["yield_now_kg"] == pytest.approx(0.2)
    assert body["detections"] == 17
    assert body["mature_share"] == pytest.approx(2 / 17)
    assert body["harvest_window"]["start"] == body["harvest_plan"][0]["date"]


def test_forecast_with_stage_rows_and_synthetic_weather(client):
    """Test classifier rows and weather from the configured source."""
    response = client.post(
        "/forecast",
        json={
            "stages": [{"stage": "ripening", "count": 6}, {"stage": "flower", "count": 2}],
            "start_date": "2025-06-01",
            "controls": {"forecast_days": 7},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["daily"]) == 7
    assert body["growth_stage"] == "Ripening"


def test_forecast_rejects_invalid_capacity(client):
    """Test invalid controls map to 422."""
    response = client.post(
        "/forecast",
        json={
            "stage_counts": {"immature": 1},
            "weather": WEATHER,
            "controls": {"harvest_capacity_kg_day": 0},
        },
    )
    assert response.status_code == 422


def test_forecast_requires_counts(client):
    """Test a request with no stage data."""
    response = client.post("/forecast", json={"weather": WEATHER})
    assert response.status_code == 422
