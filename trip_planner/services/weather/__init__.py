"""Current weather lookup.

This module resolves a city name to a short weather description using the
public wttr.in service.

Public API:
    - WeatherClient: Async HTTP client for wttr.in
    - create_weather_client: Factory function to create the client from settings
    - parse_weather_description: Extract the description from a wttr.in payload
"""
from trip_planner.services.weather.client import (
    WeatherClient,
    create_weather_client,
    parse_weather_description,
)

__all__ = [
    "WeatherClient",
    "create_weather_client",
    "parse_weather_description",
]
