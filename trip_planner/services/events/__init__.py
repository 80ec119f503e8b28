"""Live-event schedules and seat availability.

Public API:
    - StaticEventSource: In-memory schedule of live events
    - DEFAULT_EVENTS: Events served for cities without their own entry
"""
from trip_planner.services.events.client import DEFAULT_EVENTS, StaticEventSource

__all__ = [
    "DEFAULT_EVENTS",
    "StaticEventSource",
]
