from typing import List

from pydantic import BaseModel, Field


class PlanRequest(BaseModel):
    """Request payload used to plan a trip."""

    city: str = Field(..., description="City to plan the trip for")
    preferences: List[str] = Field(
        default_factory=list,
        description="Activity preferences in priority order (e.g. museums, walking tours)",
    )
