"""FastAPI surface for the city trip planner."""
from __future__ import annotations

# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()

import logging
from typing import Dict

import sentry_sdk
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from trip_planner.api.dependencies import get_trip_planner, lifespan
from trip_planner.api.schemas import PlanRequest
from trip_planner.core.config import ApiSettings, configure_logging
from trip_planner.core.schemas import TripPlan

settings = ApiSettings.from_env()
configure_logging(settings)

logger = logging.getLogger(__name__)

if settings.sentry_dsn:  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        enable_logs=True,
        traces_sample_rate=1.0,
    )

app = FastAPI(title="Trip Planner API", version="0.1.0", lifespan=lifespan)

origins = [
    "http://localhost:3000",
    "http://localhost:3001"
]


app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/plan", response_model=TripPlan)
async def plan_trip(payload: PlanRequest) -> TripPlan:
    """Plan a 3-day visit to a city from prioritised activity preferences.

    Weather, venue availability and live events are looked up concurrently,
    each preference is resolved to at most one concrete activity, a default
    activity is added when nothing survives, and the narrative itinerary is
    written from the resolved set.

    Args:
        payload: City name and preferences, highest priority first.

    Returns:
        TripPlan with ``itinerary``, ``currentWeather`` and ``activityOptions``.

    Raises:
        HTTPException: 400 for invalid input, 500 for workflow errors

    Example JSON payload:
        ```json
        {
            "city": "Barcelona",
            "preferences": ["museums", "coffee shops", "walking tours", "music events"]
        }
        ```
    """

    logger.info(f"Planning trip request for {payload.city}")
    logger.debug(f"Preferences: {payload.preferences}")

    planner = get_trip_planner()
    try:
        plan = await planner.plan_trip(payload.city, payload.preferences)
    except ValueError as exc:
        logger.error(f"Value error during plan: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during plan: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return plan


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "trip-planner-api"}
