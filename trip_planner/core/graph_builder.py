from typing import Any

from langgraph.graph import END, START, StateGraph

from trip_planner.core.nodes import (
    make_events_node,
    make_fallback_node,
    make_resolve_node,
    make_synthesis_node,
    make_venues_node,
    make_weather_node,
)
from trip_planner.core.schemas import PlanningContext, PlanningState
from trip_planner.core.synthesizer import ItinerarySynthesizer
from trip_planner.services import EventSource, VenueSource, WeatherSource

FETCH_NODES = ["fetch_weather", "fetch_venues", "fetch_events"]


def build_planning_graph(
    *,
    weather_source: WeatherSource,
    venue_source: VenueSource,
    event_source: EventSource,
    synthesizer: ItinerarySynthesizer,
) -> Any:
    """Wire all nodes into a compiled LangGraph state machine."""

    graph_builder = StateGraph(state_schema=PlanningState, context_schema=PlanningContext)

    graph_builder.add_node("fetch_weather", make_weather_node(weather_source))
    graph_builder.add_node("fetch_venues", make_venues_node(venue_source))
    graph_builder.add_node("fetch_events", make_events_node(event_source))
    graph_builder.add_node("resolve_activities", make_resolve_node())
    graph_builder.add_node("apply_fallback", make_fallback_node())
    graph_builder.add_node("synthesize_itinerary", make_synthesis_node(synthesizer))

    # Parallel fetches
    for name in FETCH_NODES:
        graph_builder.add_edge(START, name)

    # Resolution waits for every fetch
    graph_builder.add_edge(FETCH_NODES, "resolve_activities")
    graph_builder.add_edge("resolve_activities", "apply_fallback")
    graph_builder.add_edge("apply_fallback", "synthesize_itinerary")
    graph_builder.add_edge("synthesize_itinerary", END)

    return graph_builder.compile()
