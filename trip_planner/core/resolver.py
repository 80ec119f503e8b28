"""Resolution of classified preferences into concrete activity options.

Each preference resolves to at most one recommendation, read from the venue
and event snapshots fetched at the start of the run. "First matching record"
is the selection policy, so the snapshot order decides which venue or event
is recommended; the lists are never re-sorted here.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from trip_planner.core.classifier import classify
from trip_planner.core.schemas import ClassificationTag, EventRecord, VenueRecord

logger = logging.getLogger(__name__)

OUTDOOR_ACTIVITY = "Outdoor walking tour"
BAD_OUTDOOR_WEATHER = frozenset({"rain", "snow"})


def is_outdoor_weather(weather: Optional[str]) -> bool:
    """Return ``False`` when the weather rules out an outdoor activity."""

    return (weather or "").strip().lower() not in BAD_OUTDOOR_WEATHER


def _first_bookable_venue(venues: Sequence[VenueRecord]) -> Optional[VenueRecord]:
    return next((venue for venue in venues if venue.bookable), None)


def _first_available_event(events: Sequence[EventRecord]) -> Optional[EventRecord]:
    return next((event for event in events if event.is_available), None)


def resolve(
    preference: str,
    tag: ClassificationTag,
    venues: Sequence[VenueRecord],
    events: Sequence[EventRecord],
    weather: Optional[str],
) -> Optional[str]:
    """Return the recommendation for ``preference`` or ``None`` when it is dropped."""

    if not preference.strip():
        return None

    if tag is ClassificationTag.MUSEUM:
        venue = _first_bookable_venue(venues)
        return f"Visit {venue.name}" if venue else None

    if tag is ClassificationTag.LIVE_EVENT:
        event = _first_available_event(events)
        return f"Attend {event.name}" if event else None

    if tag is ClassificationTag.OUTDOOR:
        return OUTDOOR_ACTIVITY if is_outdoor_weather(weather) else None

    # Generic preferences pass through unchanged
    return preference


async def _resolve_one(
    preference: str,
    venues: Sequence[VenueRecord],
    events: Sequence[EventRecord],
    weather: Optional[str],
) -> Optional[str]:
    tag = classify(preference)
    option = resolve(preference, tag, venues, events, weather)
    if option is None:
        logger.info(f"Dropping preference '{preference}' ({tag.value}): no available option")
    else:
        logger.debug(f"Resolved '{preference}' ({tag.value}) -> '{option}'")
    return option


async def resolve_all(
    preferences: Sequence[str],
    venues: Sequence[VenueRecord],
    events: Sequence[EventRecord],
    weather: Optional[str],
) -> List[str]:
    """Classify and resolve every preference, keeping the input order."""

    results = await asyncio.gather(
        *(_resolve_one(preference, venues, events, weather) for preference in preferences)
    )
    return [option for option in results if option is not None]
