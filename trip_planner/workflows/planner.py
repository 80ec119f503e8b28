"""Trip planning entry point.

``TripPlanner`` owns the data sources, the narrative model and the compiled
LangGraph workflow. One instance can serve concurrent planning runs: each run
gets its own graph state and context, and nothing is cached between runs.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel

from trip_planner.core.config import ApiSettings
from trip_planner.core.graph_builder import build_planning_graph
from trip_planner.core.schemas import PlanningContext, PlanningState, TripPlan
from trip_planner.core.synthesizer import ItinerarySynthesizer, build_narrative_model
from trip_planner.services import (
    EventSource,
    StaticEventSource,
    StaticVenueSource,
    VenueSource,
    WeatherSource,
    create_weather_client,
)

logger = logging.getLogger(__name__)


class TripPlanner:
    """Container for the planning workflow and its collaborators.

    Attributes:
        weather_source: Resolves a city to its current weather description
        venue_source: Lists museums and galleries with open/ticket status
        event_source: Lists live events with seat availability
        synthesizer: Writes the narrative itinerary
        graph: Compiled LangGraph workflow
    """

    def __init__(
        self,
        *,
        weather_source: WeatherSource,
        venue_source: VenueSource,
        event_source: EventSource,
        llm: BaseChatModel,
    ) -> None:
        self.weather_source = weather_source
        self.venue_source = venue_source
        self.event_source = event_source
        self.llm = llm
        self.synthesizer = ItinerarySynthesizer(llm)
        self.graph = build_planning_graph(
            weather_source=weather_source,
            venue_source=venue_source,
            event_source=event_source,
            synthesizer=self.synthesizer,
        )

    @classmethod
    def from_settings(cls, settings: Optional[ApiSettings] = None) -> "TripPlanner":
        """Build a planner with the default sources for ``settings``."""

        settings = settings or ApiSettings.from_env()
        return cls(
            weather_source=create_weather_client(settings),
            venue_source=StaticVenueSource(),
            event_source=StaticEventSource(),
            llm=build_narrative_model(settings),
        )

    def __repr__(self) -> str:
        llm_name = (
            getattr(self.llm, "model_name", None)
            or getattr(self.llm, "model", None)
            or type(self.llm).__name__
        )
        return (
            f"TripPlanner(llm='{llm_name}', "
            f"weather={type(self.weather_source).__name__}, "
            f"venues={type(self.venue_source).__name__}, "
            f"events={type(self.event_source).__name__})"
        )

    async def close(self) -> None:
        """Release any HTTP resources held by the sources."""

        for source in (self.weather_source, self.venue_source, self.event_source):
            aclose = getattr(source, "aclose", None)
            if aclose is not None:
                await aclose()

    async def plan_trip(self, city: str, preferences: Sequence[str]) -> TripPlan:
        """Plan a multi-day visit to ``city`` from prioritised preferences.

        Weather, venues and events are fetched concurrently, every preference
        is resolved against that snapshot, the fallback policy runs once on the
        aggregate and the itinerary is synthesized last.

        Args:
            city: The city to plan the trip for
            preferences: Free-text activity interests, highest priority first

        Returns:
            TripPlan with a non-empty ``activity_options`` tuple
        """
        context = PlanningContext(city=city, preferences=list(preferences))
        logger.info(f"Planning trip to {context.city} with preferences {context.preferences}")

        result = await self.graph.ainvoke(PlanningState(), context=context)

        plan = TripPlan(
            itinerary=result["itinerary"],
            current_weather=result.get("weather"),
            activity_options=result["activity_options"],
        )
        logger.info(
            f"Trip plan for {context.city} completed: weather={plan.current_weather}, "
            f"options={plan.activity_options}, fallback={result.get('fallback_applied', False)}"
        )
        return plan
