"""Rule-based tone and location inference.

Both lookups scan an ordered table and stop at the first hit; neither tries to
find the longest or most specific match.
"""

from __future__ import annotations

from typing import Sequence

from scene_director.seeding import select_one
from scene_director.tables import DEFAULT_TONE, FALLBACK_LOCATIONS, GENRE_TONES, LOCATION_PRESETS


def infer_tone(idea: str, table: Sequence[tuple[str, str]] = GENRE_TONES) -> str:
    """Return the tone of the first keyword found in *idea*, else DEFAULT_TONE."""
    lower = idea.lower()
    for keyword, tone in table:
        if keyword in lower:
            return tone
    return DEFAULT_TONE


def infer_location(
    idea: str,
    seed: int,
    presets: Sequence[tuple[Sequence[str], str, str]] = LOCATION_PRESETS,
    fallbacks: Sequence[tuple[str, str]] = FALLBACK_LOCATIONS,
) -> tuple[str, str]:
    """Return ``(location, time_of_day)`` for *idea*.

    The first preset with any trigger keyword inside the lowercased idea wins;
    with no match the seed picks one of *fallbacks*.
    """
    lower = idea.lower()
    for keywords, location, time_of_day in presets:
        if any(word in lower for word in keywords):
            return location, time_of_day
    return select_one(fallbacks, seed)
