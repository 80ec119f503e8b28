from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI

from trip_planner.core.config import ApiSettings
from trip_planner.workflows.planner import TripPlanner


@lru_cache(maxsize=1)
def get_trip_planner() -> TripPlanner:
    settings = ApiSettings.from_env()
    return TripPlanner.from_settings(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        if get_trip_planner.cache_info().currsize:
            await get_trip_planner().close()
