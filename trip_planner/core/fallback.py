"""Default activity injected when no preference survives resolution."""
from __future__ import annotations

from typing import List, Optional, Sequence

INDOOR_DEFAULT = "Read a book"
OUTDOOR_DEFAULT = "Go for a walk"


def default_activity(weather: Optional[str]) -> str:
    """Pick the weather-appropriate default activity."""

    normalized = (weather or "").strip().lower()
    if "rain" in normalized or normalized == "snow":
        return INDOOR_DEFAULT
    return OUTDOOR_DEFAULT


def apply_fallback(options: Sequence[str], weather: Optional[str]) -> List[str]:
    """Return ``options`` unchanged, or a single default activity when it is empty."""

    if options:
        return list(options)
    return [default_activity(weather)]
