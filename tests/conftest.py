"""Pytest configuration for the trip planner project."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

# Ensure the project root is on sys.path so that import trip_planner works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trip_planner.core.schemas import EventRecord, VenueRecord  # noqa: E402


@pytest.fixture
def sample_venues() -> List[VenueRecord]:
    return [
        VenueRecord(name="City Museum", is_open=True, has_tickets=True),
        VenueRecord(name="Art Gallery", is_open=False, has_tickets=False),
    ]


@pytest.fixture
def sample_events() -> List[EventRecord]:
    return [
        EventRecord(name="Jazz Night", is_available=True),
        EventRecord(name="Rock Concert", is_available=False),
    ]
