"""LangGraph nodes for the trip planning workflow.

Each ``make_*_node`` factory binds one collaborator and returns the async node
function. Nodes read the run parameters from ``runtime.context`` and return
only the state keys they own.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from langgraph.runtime import Runtime

from trip_planner.core.fallback import apply_fallback
from trip_planner.core.resolver import resolve_all
from trip_planner.core.schemas import UNKNOWN_WEATHER, PlanningContext, PlanningState
from trip_planner.core.synthesizer import ItinerarySynthesizer
from trip_planner.services import EventSource, VenueSource, WeatherSource

logger = logging.getLogger(__name__)


def make_weather_node(weather_source: WeatherSource):
    """Return the node that looks up the current weather."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        city = runtime.context.city
        try:
            weather = await weather_source.fetch_weather(city)
        except Exception as e:
            logger.error(f"Weather source failed for {city}: {e}")
            weather = UNKNOWN_WEATHER
        return {"weather": weather or UNKNOWN_WEATHER}

    return node


def make_venues_node(venue_source: VenueSource):
    """Return the node that fetches venue availability."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        city = runtime.context.city
        try:
            venues = await venue_source.list_venues(city)
        except Exception as e:
            logger.error(f"Venue source failed for {city}: {e}")
            venues = []
        logger.debug(f"Fetched {len(venues)} venues for {city}")
        return {"venues": list(venues)}

    return node


def make_events_node(event_source: EventSource):
    """Return the node that fetches the live-event schedule."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        city = runtime.context.city
        try:
            events = await event_source.list_events(city)
        except Exception as e:
            logger.error(f"Event source failed for {city}: {e}")
            events = []
        logger.debug(f"Fetched {len(events)} events for {city}")
        return {"events": list(events)}

    return node


def make_resolve_node():
    """Return the node that turns every preference into zero or one option."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        options = await resolve_all(
            runtime.context.preferences,
            state.venues,
            state.events,
            state.weather,
        )
        logger.info(
            f"Resolved {len(options)} of {len(runtime.context.preferences)} preferences"
        )
        return {"activity_options": options}

    return node


def make_fallback_node():
    """Return the node that guarantees at least one activity option."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        options = apply_fallback(state.activity_options, state.weather)
        fallback_applied = not state.activity_options
        if fallback_applied:
            logger.info(f"No preference survived; falling back to '{options[0]}'")
        return {"activity_options": options, "fallback_applied": fallback_applied}

    return node


def make_synthesis_node(synthesizer: ItinerarySynthesizer):
    """Return the node that writes the narrative itinerary."""

    async def node(state: PlanningState, runtime: Runtime[PlanningContext]) -> Dict[str, Any]:
        itinerary = await synthesizer.synthesize(
            runtime.context.city,
            state.weather,
            runtime.context.preferences,
            state.activity_options,
        )
        return {"itinerary": itinerary}

    return node
