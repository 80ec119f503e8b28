"""Pydantic data models for the city trip planner.

This module contains the data models shared by the planning workflow:

- VenueRecord / EventRecord: snapshots returned by the availability sources
- ClassificationTag: the category a preference is routed to
- PlanningContext: per-run parameters handed to the LangGraph runtime
- PlanningState: LangGraph workflow state
- TripPlan: the final, immutable output of one planning run
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

UNKNOWN_WEATHER = "Unknown"


class ClassificationTag(str, Enum):
    """Category a free-text preference is routed to for resolution."""

    MUSEUM = "museum"
    LIVE_EVENT = "live_event"
    OUTDOOR = "outdoor"
    GENERIC = "generic"


class VenueRecord(BaseModel):
    """Opening and ticketing status of a museum or gallery."""

    name: str = Field(description="Venue name")
    is_open: bool = Field(default=False, alias="open", description="Whether the venue is open")
    has_tickets: bool = Field(
        default=False, alias="ticketsAvailable", description="Whether tickets can be bought"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @computed_field(return_type=bool)
    @property
    def bookable(self) -> bool:
        """A venue can be booked only when it is open and has tickets left."""

        return self.is_open and self.has_tickets


class EventRecord(BaseModel):
    """Seat availability of a scheduled live event."""

    name: str = Field(description="Event name")
    is_available: bool = Field(
        default=False, alias="available", description="Whether seats are still available"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PlanningContext(BaseModel):
    """Parameters of a single planning run.

    Attributes:
        city: The city to plan the trip for
        preferences: Free-text activity interests, highest priority first
    """

    city: str = Field(description="City to plan the trip for")
    preferences: List[str] = Field(
        default_factory=list, description="Activity preferences in priority order"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("city")
    @classmethod
    def _strip_city(cls, value: str) -> str:
        return value.strip()


class PlanningState(BaseModel):
    """LangGraph state for the planning workflow.

    Every node writes only the keys it owns, so the parallel fetch nodes
    never update the same channel.
    """

    weather: Optional[str] = Field(default=None, description="Normalised current weather")
    venues: List[VenueRecord] = Field(default_factory=list, description="Venue snapshot")
    events: List[EventRecord] = Field(default_factory=list, description="Event snapshot")
    activity_options: List[str] = Field(
        default_factory=list, description="Resolved recommendations in preference order"
    )
    fallback_applied: bool = Field(default=False, description="Whether the default activity was injected")
    itinerary: Optional[str] = Field(default=None, description="Narrative itinerary")


class TripPlan(BaseModel):
    """Final output artifact of one planning run."""

    itinerary: str = Field(description="Narrative multi-day itinerary")
    current_weather: Optional[str] = Field(
        default=None, alias="currentWeather", description="Weather at planning time"
    )
    activity_options: Tuple[str, ...] = Field(
        alias="activityOptions",
        min_length=1,
        description="Resolved activities in preference order",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = [
    "UNKNOWN_WEATHER",
    "ClassificationTag",
    "EventRecord",
    "PlanningContext",
    "PlanningState",
    "TripPlan",
    "VenueRecord",
]
