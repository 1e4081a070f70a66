"""
Slot generation.

Walks the 24 whole hours of a reference day, projects each hour into every
participant's zone and records who is inside their working window.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Dict, Iterator, List, Sequence

from ..domain.models import Participant, TimeSlot
from .timezones import get_zone, local_time
from .working_hours import is_working

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def hour_instant(reference_day: date, hour: int, reference_tz: str = "UTC") -> datetime:
    """Aware instant of ``hour``:00 on ``reference_day`` in ``reference_tz``."""
    zone = get_zone(reference_tz)
    return zone.normalize(zone.localize(datetime.combine(reference_day, time(hour))))


def attendance_threshold(total: int) -> int:
    """Minimum attendance for a slot to qualify: two, or everyone if fewer."""
    return min(2, total)


def iter_hour_slots(
    participants: Sequence[Participant],
    reference_day: date,
    reference_tz: str = "UTC",
) -> Iterator[TimeSlot]:
    """
    Yield one slot per hour of ``reference_day``, empty slots included.

    Each call starts a fresh pass, so the sequence can be iterated again and
    gives the same result for the same inputs.
    """
    for hour in range(HOURS_PER_DAY):
        start = hour_instant(reference_day, hour, reference_tz)
        available = [
            p for p in participants
            if is_working(local_time(start, p.timezone), p.work_start, p.work_end)
        ]
        yield TimeSlot(
            time=hour_label(hour),
            hour=hour,
            start=start,
            participants=tuple(p.name for p in available),
            participant_ids=tuple(p.id for p in available),
        )


def generate_time_slots(
    participants: Sequence[Participant],
    reference_day: date,
    reference_tz: str = "UTC",
) -> List[TimeSlot]:
    """
    Qualifying slots of ``reference_day`` in hour order.

    A slot is kept when at least one participant is available and its
    attendance reaches :func:`attendance_threshold`. No participants means
    no slots. Hours that do not exist on the reference clock (the skipped
    hour of a spring-forward day) are dropped so no instant is offered twice.
    """
    threshold = attendance_threshold(len(participants))
    slots = []
    for slot in iter_hour_slots(participants, reference_day, reference_tz):
        assert 0 <= slot.hour < HOURS_PER_DAY, slot.hour
        if slot.start.hour != slot.hour:
            continue
        if slot.attendance > 0 and slot.attendance >= threshold:
            slots.append(slot)

    logger.debug(
        "Generated %d qualifying slots for %d participants on %s (%s)",
        len(slots), len(participants), reference_day, reference_tz,
    )
    return slots


def availability_row(
    participant: Participant,
    reference_day: date,
    reference_tz: str = "UTC",
) -> List[Dict[str, Any]]:
    """
    Hour-by-hour view of one participant's day.

    Returns:
        list[dict]: [
            {"hour": 0, "time": "00:00", "local_time": "19:00", "is_working": False},
            ...
        ]
    """
    row = []
    for hour in range(HOURS_PER_DAY):
        start = hour_instant(reference_day, hour, reference_tz)
        local = local_time(start, participant.timezone)
        row.append({
            "hour": hour,
            "time": hour_label(hour),
            "local_time": local,
            "is_working": is_working(local, participant.work_start, participant.work_end),
        })
    return row
