"""Instant to wall-clock conversion backed by the pytz zone database."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import List, Tuple

import pytz

from ..domain.errors import InvalidTimeZone

UTC = pytz.UTC

# Zones offered to clients; any other identifier known to pytz is accepted too.
TIMEZONES: List[Tuple[str, str]] = [
    ("America/New_York", "New York (EST/EDT)"),
    ("America/Chicago", "Chicago (CST/CDT)"),
    ("America/Denver", "Denver (MST/MDT)"),
    ("America/Los_Angeles", "Los Angeles (PST/PDT)"),
    ("Europe/London", "London (GMT/BST)"),
    ("Europe/Paris", "Paris (CET/CEST)"),
    ("Europe/Berlin", "Berlin (CET/CEST)"),
    ("Europe/Madrid", "Madrid (CET/CEST)"),
    ("Asia/Tokyo", "Tokyo (JST)"),
    ("Asia/Shanghai", "Shanghai (CST)"),
    ("Asia/Kolkata", "Mumbai (IST)"),
    ("Asia/Bangkok", "Bangkok (ICT)"),
    ("Australia/Sydney", "Sydney (AEST/AEDT)"),
    ("Pacific/Auckland", "Auckland (NZST/NZDT)"),
]


def get_zone(zone: str) -> tzinfo:
    """Return the pytz zone for ``zone`` or raise :class:`InvalidTimeZone`."""
    if not isinstance(zone, str) or not zone:
        raise InvalidTimeZone(str(zone))
    try:
        return pytz.timezone(zone)
    except pytz.UnknownTimeZoneError:
        raise InvalidTimeZone(zone) from None


def ensure_timezone(zone: str) -> str:
    """Validate ``zone`` and return its canonical identifier."""
    return get_zone(zone).zone


def zone_label(zone: str) -> str:
    for value, label in TIMEZONES:
        if value == zone:
            return label
    return zone


def to_zone(instant: datetime, zone: str) -> datetime:
    """Project ``instant`` into ``zone``; naive instants are read as UTC."""
    if instant.tzinfo is None:
        instant = UTC.localize(instant)
    return instant.astimezone(get_zone(zone))


def local_time(instant: datetime, zone: str) -> str:
    """Wall-clock ``HH:MM`` (24-hour) of ``instant`` in ``zone``."""
    return to_zone(instant, zone).strftime("%H:%M")


def local_date(instant: datetime, zone: str) -> str:
    """Short calendar label such as ``Mon, Jan 15``."""
    local = to_zone(instant, zone)
    return f"{local:%a, %b} {local.day}"
