"""Museum and gallery availability.

Public API:
    - StaticVenueSource: In-memory catalogue of venue opening/ticket status
    - DEFAULT_VENUES: Venues served for cities without their own entry
"""
from trip_planner.services.venues.client import DEFAULT_VENUES, StaticVenueSource

__all__ = [
    "DEFAULT_VENUES",
    "StaticVenueSource",
]
