from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from trip_planner.core.config import ApiSettings, DEFAULT_WEATHER_BASE_URL
from trip_planner.core.schemas import UNKNOWN_WEATHER

logger = logging.getLogger(__name__)


def parse_weather_description(payload: Any) -> str:
    """Pull ``current_condition[0].weatherDesc[0].value`` out of a wttr.in payload."""

    try:
        value = payload["current_condition"][0]["weatherDesc"][0]["value"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Weather payload is missing current_condition.weatherDesc")
        return UNKNOWN_WEATHER
    if not isinstance(value, str) or not value.strip():
        return UNKNOWN_WEATHER
    return value.strip()


class WeatherClient:
    """Thin async wrapper around the wttr.in JSON endpoint."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_WEATHER_BASE_URL,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"accept": "application/json"},
            timeout=httpx.Timeout(timeout_s, connect=5.0),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTPX client."""

        await self._client.aclose()

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self._client.aclose()

    async def _aget(self, path: str, params: Mapping[str, Any]) -> Any:
        response = await self._client.get(path, params=dict(params))
        response.raise_for_status()
        return response.json()

    async def fetch_weather(self, city: str) -> str:
        """Return the current weather description for ``city``; never raises."""

        if not city or not city.strip():
            return UNKNOWN_WEATHER

        logger.info(f"Fetching weather data for {city}")
        try:
            data = await self._aget(f"/{quote(city.strip(), safe='')}", {"format": "j1"})
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch weather data for {city}: {e}")
            return UNKNOWN_WEATHER

        weather = parse_weather_description(data)
        logger.debug(f"Weather for {city}: {weather}")
        return weather


def create_weather_client(settings: ApiSettings) -> WeatherClient:
    """Instantiate the weather client using project settings."""

    return WeatherClient(base_url=settings.weather_base_url, timeout_s=settings.http_timeout_s)
