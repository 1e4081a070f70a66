"""Inclusive working-window checks on ``HH:MM`` wall-clock strings."""

from __future__ import annotations

import re
from typing import Tuple

from ..domain.errors import InvalidClockTime

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock(value: str) -> Tuple[int, int]:
    """Split ``HH:MM`` into ``(hour, minute)``.

    Raises:
        InvalidClockTime: when the value is not a valid 24-hour clock time.
    """
    match = _CLOCK_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidClockTime(value)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidClockTime(value)
    return hour, minute


def normalize_clock(value: str) -> str:
    """Return ``value`` as zero-padded ``HH:MM``."""
    hour, minute = parse_clock(value)
    return f"{hour:02d}:{minute:02d}"


def to_minutes(value: str) -> int:
    hour, minute = parse_clock(value)
    return hour * 60 + minute


def is_working(local_time: str, work_start: str, work_end: str) -> bool:
    """True when ``work_start <= local_time <= work_end`` in minutes since midnight.

    Both bounds are inclusive. A window ending before it starts is empty.
    """
    minutes = to_minutes(local_time)
    return to_minutes(work_start) <= minutes <= to_minutes(work_end)
