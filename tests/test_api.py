"""Integration-focused tests for the Trip Planner FastAPI surface."""
from __future__ import annotations

from typing import Any, List, Sequence, Tuple
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from trip_planner.api import app as api_app
from trip_planner.api import dependencies
from trip_planner.core.schemas import TripPlan


class StubPlanner:
    """Asynchronous stub that mimics the planner used by the API."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, List[str]]] = []
        self.result = TripPlan(
            itinerary="Here is a detailed 3-day itinerary ...",
            current_weather="Sunny",
            activity_options=["Visit City Museum", "coffee shops"],
        )
        self.error: Any = None

    async def plan_trip(self, city: str, preferences: Sequence[str]) -> TripPlan:
        self.calls.append((city, list(preferences)))
        if self.error is not None:
            raise self.error
        return self.result

    async def close(self) -> None:
        return None


@pytest.fixture
def stub_planner(monkeypatch) -> StubPlanner:
    """Provide a stubbed planner for API integration tests."""

    planner = StubPlanner()
    api_app.get_trip_planner.cache_clear()
    monkeypatch.setattr(api_app, "get_trip_planner", lambda: planner)
    return planner


@pytest.fixture
def client(stub_planner: StubPlanner) -> TestClient:
    """Yield a TestClient that uses the stubbed planner."""

    with TestClient(api_app.app) as test_client:
        yield test_client


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "trip-planner-api"}


def test_plan_returns_trip_plan(client: TestClient, stub_planner: StubPlanner) -> None:
    payload = {
        "city": "Barcelona",
        "preferences": ["museums", "coffee shops", "walking tours", "music events"],
    }
    response = client.post("/plan", json=payload)

    assert response.status_code == 200
    assert response.json() == {
        "itinerary": "Here is a detailed 3-day itinerary ...",
        "currentWeather": "Sunny",
        "activityOptions": ["Visit City Museum", "coffee shops"],
    }
    assert stub_planner.calls[-1] == ("Barcelona", payload["preferences"])


def test_plan_without_weather_returns_null(client: TestClient, stub_planner: StubPlanner) -> None:
    stub_planner.result = TripPlan(
        itinerary="Could not generate itinerary",
        activity_options=["Go for a walk"],
    )

    response = client.post("/plan", json={"city": "Oslo"})

    assert response.status_code == 200
    data = response.json()
    assert data["currentWeather"] is None
    assert data["activityOptions"] == ["Go for a walk"]
    assert stub_planner.calls[-1] == ("Oslo", [])


def test_plan_missing_city_is_rejected(client: TestClient) -> None:
    response = client.post("/plan", json={"preferences": ["museums"]})
    assert response.status_code == 422


def test_plan_blank_city_still_returns_plan(client: TestClient, stub_planner: StubPlanner) -> None:
    response = client.post("/plan", json={"city": "  ", "preferences": ["museums"]})

    assert response.status_code == 200
    assert response.json()["activityOptions"] == ["Visit City Museum", "coffee shops"]
    assert stub_planner.calls[-1] == ("  ", ["museums"])


def test_plan_value_error_returns_400(client: TestClient, stub_planner: StubPlanner) -> None:
    stub_planner.error = ValueError("bad preferences")

    response = client.post("/plan", json={"city": "Rome", "preferences": ["museums"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "bad preferences"


def test_plan_unexpected_error_returns_500(client: TestClient, stub_planner: StubPlanner) -> None:
    stub_planner.error = RuntimeError("graph exploded")

    response = client.post("/plan", json={"city": "Rome", "preferences": []})

    assert response.status_code == 500
    assert response.json()["detail"] == "graph exploded"


def test_default_planner_serves_request_and_closes_on_shutdown(monkeypatch) -> None:
    monkeypatch.delenv("XAI_API_KEY", raising=False)
    mock_http = AsyncMock(spec=httpx.AsyncClient)
    weather_response = Mock()  # httpx Response methods are sync
    weather_response.json.return_value = {
        "current_condition": [{"weatherDesc": [{"value": "Sunny"}]}]
    }
    weather_response.raise_for_status.return_value = None
    mock_http.get.return_value = weather_response

    dependencies.get_trip_planner.cache_clear()
    try:
        with patch("httpx.AsyncClient", return_value=mock_http):
            with TestClient(api_app.app) as test_client:
                response = test_client.post(
                    "/plan",
                    json={"city": "Barcelona", "preferences": ["museums", "walking tours"]},
                )
    finally:
        dependencies.get_trip_planner.cache_clear()

    assert response.status_code == 200
    assert response.json() == {
        "itinerary": "Here is a detailed 3-day itinerary ...",
        "currentWeather": "Sunny",
        "activityOptions": ["Visit City Museum", "Outdoor walking tour"],
    }
    mock_http.aclose.assert_awaited_once()
