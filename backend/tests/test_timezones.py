"""Tests for instant to wall-clock conversion."""

from datetime import datetime
from pathlib import Path
import sys

import pytest
import pytz

sys.path.append(str(Path(__file__).resolve().parents[1]))
from timesync.domain.errors import InvalidTimeZone  # noqa: E402
from timesync.scheduling.timezones import (  # noqa: E402
    TIMEZONES,
    ensure_timezone,
    local_date,
    local_time,
    zone_label,
)

UTC = pytz.UTC


def test_local_time_in_winter():
    instant = datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
    assert local_time(instant, "America/New_York") == "09:00"
    assert local_time(instant, "Europe/London") == "14:00"
    assert local_time(instant, "Asia/Tokyo") == "23:00"


def test_local_time_follows_daylight_saving():
    instant = datetime(2024, 7, 15, 14, 0, tzinfo=UTC)
    assert local_time(instant, "America/New_York") == "10:00"
    assert local_time(instant, "Europe/London") == "15:00"


def test_local_time_with_half_hour_offset():
    instant = datetime(2024, 1, 15, 4, 0, tzinfo=UTC)
    assert local_time(instant, "Asia/Kolkata") == "09:30"


def test_naive_instant_is_read_as_utc():
    assert local_time(datetime(2024, 1, 15, 14, 0), "America/New_York") == "09:00"


def test_local_date_crosses_midnight():
    assert local_date(datetime(2024, 1, 15, 14, 0, tzinfo=UTC), "Asia/Tokyo") == "Mon, Jan 15"
    assert local_date(datetime(2024, 1, 15, 15, 0, tzinfo=UTC), "Asia/Tokyo") == "Tue, Jan 16"
    assert local_date(datetime(2024, 1, 15, 3, 0, tzinfo=UTC), "America/Los_Angeles") == "Sun, Jan 14"


def test_unknown_zone_is_rejected():
    with pytest.raises(InvalidTimeZone):
        local_time(datetime(2024, 1, 15, tzinfo=UTC), "Mars/Olympus_Mons")
    with pytest.raises(ValueError):
        ensure_timezone("")


def test_ensure_timezone_returns_identifier():
    assert ensure_timezone("Europe/London") == "Europe/London"
    assert ensure_timezone("UTC") == "UTC"


def test_curated_zones_are_valid():
    for value, _ in TIMEZONES:
        assert ensure_timezone(value) == value
    assert zone_label("Asia/Kolkata") == "Mumbai (IST)"
    assert zone_label("Africa/Nairobi") == "Africa/Nairobi"
