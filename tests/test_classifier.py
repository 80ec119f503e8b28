"""Tests for preference classification."""
from __future__ import annotations

import pytest

from trip_planner.core.classifier import classify
from trip_planner.core.schemas import ClassificationTag


@pytest.mark.parametrize(
    ("preference", "expected"),
    [
        ("Visit the Science Museum", ClassificationTag.MUSEUM),
        ("Jazz concert tonight", ClassificationTag.LIVE_EVENT),
        ("Walking tour", ClassificationTag.OUTDOOR),
        ("Coffee shops", ClassificationTag.GENERIC),
    ],
)
def test_classify_examples(preference, expected):
    assert classify(preference) is expected


def test_classify_is_case_insensitive():
    assert classify("MUSEUMS") is ClassificationTag.MUSEUM
    assert classify("Stand-up COMEDY") is ClassificationTag.LIVE_EVENT


def test_museum_takes_precedence_over_live_event():
    """A string matching both keyword sets is routed to the museum branch."""
    assert classify("live music at the museum") is ClassificationTag.MUSEUM


def test_live_event_takes_precedence_over_outdoor():
    assert classify("walking concert show") is ClassificationTag.LIVE_EVENT


@pytest.mark.parametrize(
    "preference",
    ["music events", "theater", "a play", "live shows", "comedy club"],
)
def test_live_event_keywords(preference):
    assert classify(preference) is ClassificationTag.LIVE_EVENT


def test_empty_preference_is_generic():
    assert classify("") is ClassificationTag.GENERIC
