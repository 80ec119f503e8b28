from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from trip_planner.core.schemas import EventRecord

logger = logging.getLogger(__name__)

DEFAULT_EVENTS: Tuple[EventRecord, ...] = (
    EventRecord(name="Jazz Night", is_available=True),
    EventRecord(name="Rock Concert", is_available=False),
)


class StaticEventSource:
    """In-memory live-event schedule with seat availability."""

    def __init__(
        self,
        catalogue: Optional[Mapping[str, Sequence[EventRecord]]] = None,
        *,
        default: Sequence[EventRecord] = DEFAULT_EVENTS,
    ) -> None:
        self._catalogue: Dict[str, Tuple[EventRecord, ...]] = {
            city.strip().lower(): tuple(events) for city, events in (catalogue or {}).items()
        }
        self._default = tuple(default)

    async def list_events(self, city: Optional[str] = None) -> List[EventRecord]:
        """Return the scheduled events for ``city`` in schedule order."""

        logger.debug(f"Fetching live events for {city or 'any city'}")
        key = (city or "").strip().lower()
        return list(self._catalogue.get(key, self._default))
