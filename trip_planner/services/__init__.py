"""External data sources consulted while planning a trip.

This package provides the leaf collaborators of the planning workflow:

- Weather: current conditions for a city (wttr.in)
- Venues: museum and gallery opening/ticket status
- Events: live-event schedules and seat availability

Any object with the matching coroutine method can stand in for a source, so
tests and alternative backends plug in without touching the planner.

Example Usage:
    >>> from trip_planner.services import create_weather_client
    >>> from trip_planner.core.config import ApiSettings
    >>>
    >>> client = create_weather_client(ApiSettings.from_env())
    >>> weather = await client.fetch_weather("Barcelona")
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from trip_planner.core.schemas import EventRecord, VenueRecord

# Weather
from trip_planner.services.weather import (
    WeatherClient,
    create_weather_client,
    parse_weather_description,
)

# Venues
from trip_planner.services.venues import DEFAULT_VENUES, StaticVenueSource

# Events
from trip_planner.services.events import DEFAULT_EVENTS, StaticEventSource


class WeatherSource(Protocol):
    async def fetch_weather(self, city: str) -> str: ...


class VenueSource(Protocol):
    async def list_venues(self, city: Optional[str] = None) -> List[VenueRecord]: ...


class EventSource(Protocol):
    async def list_events(self, city: Optional[str] = None) -> List[EventRecord]: ...


__all__ = [
    # Contracts
    "WeatherSource",
    "VenueSource",
    "EventSource",
    # Weather
    "WeatherClient",
    "create_weather_client",
    "parse_weather_description",
    # Venues
    "DEFAULT_VENUES",
    "StaticVenueSource",
    # Events
    "DEFAULT_EVENTS",
    "StaticEventSource",
]
