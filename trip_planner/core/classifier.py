"""Keyword classification of free-text activity preferences."""
from __future__ import annotations

from typing import Tuple

from trip_planner.core.schemas import ClassificationTag

# Evaluated top to bottom; the first rule with a matching keyword wins.
CLASSIFICATION_RULES: Tuple[Tuple[ClassificationTag, Tuple[str, ...]], ...] = (
    (ClassificationTag.MUSEUM, ("museum",)),
    (
        ClassificationTag.LIVE_EVENT,
        ("music", "concert", "comedy", "theater", "play", "live", "show", "event"),
    ),
    (ClassificationTag.OUTDOOR, ("walking", "walk", "hike", "hiking", "tour")),
)


def classify(preference: str) -> ClassificationTag:
    """Return the category for ``preference`` using case-insensitive substring rules."""

    normalized = preference.lower()
    for tag, keywords in CLASSIFICATION_RULES:
        if any(keyword in normalized for keyword in keywords):
            return tag
    return ClassificationTag.GENERIC
