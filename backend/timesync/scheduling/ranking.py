"""Ranking of qualifying slots by attendance."""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

from ..domain.models import Participant, TimeSlot
from .slots import generate_time_slots

DEFAULT_LIMIT = 3


def rank_slots(slots: Sequence[TimeSlot], limit: int = DEFAULT_LIMIT) -> List[TimeSlot]:
    """Top ``limit`` slots by attendance, highest first.

    The sort is stable on attendance alone, so equally attended slots keep
    their hour order. An empty input gives an empty result.

    Raises:
        ValueError: when ``limit`` is less than one.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    ranked = sorted(slots, key=lambda slot: slot.attendance, reverse=True)
    return ranked[:limit]


def best_meeting_times(
    participants: Sequence[Participant],
    reference_day: date,
    reference_tz: str = "UTC",
    limit: int = DEFAULT_LIMIT,
) -> List[TimeSlot]:
    """Generate the qualifying slots of ``reference_day`` and rank them."""
    return rank_slots(
        generate_time_slots(participants, reference_day, reference_tz), limit
    )
