from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from trip_planner.core.schemas import VenueRecord

logger = logging.getLogger(__name__)

DEFAULT_VENUES: Tuple[VenueRecord, ...] = (
    VenueRecord(name="City Museum", is_open=True, has_tickets=True),
    VenueRecord(name="Art Gallery", is_open=False, has_tickets=False),
)


class StaticVenueSource:
    """In-memory venue availability catalogue.

    Cities listed in ``catalogue`` get their own venues; every other city
    falls back to ``default``. Lists are returned in catalogue order.
    """

    def __init__(
        self,
        catalogue: Optional[Mapping[str, Sequence[VenueRecord]]] = None,
        *,
        default: Sequence[VenueRecord] = DEFAULT_VENUES,
    ) -> None:
        self._catalogue: Dict[str, Tuple[VenueRecord, ...]] = {
            city.strip().lower(): tuple(venues) for city, venues in (catalogue or {}).items()
        }
        self._default = tuple(default)

    async def list_venues(self, city: Optional[str] = None) -> List[VenueRecord]:
        """Return the venues for ``city`` with their open and ticket status."""

        logger.debug(f"Fetching museum hours for {city or 'any city'}")
        key = (city or "").strip().lower()
        return list(self._catalogue.get(key, self._default))
