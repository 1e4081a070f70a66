"""Tests for ranking qualifying slots."""

from datetime import date
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from timesync.domain.models import Participant, TimeSlot  # noqa: E402
from timesync.scheduling.ranking import best_meeting_times, rank_slots  # noqa: E402
from timesync.scheduling.slots import generate_time_slots, hour_instant  # noqa: E402

DAY = date(2024, 1, 15)


def person(pid, name, zone):
    return Participant(id=pid, name=name, timezone=zone)


def slot(hour, *names):
    return TimeSlot(
        time=f"{hour:02d}:00",
        hour=hour,
        start=hour_instant(DAY, hour),
        participants=names,
        participant_ids=names,
    )


def test_sorted_by_attendance_with_hour_order_on_ties():
    slots = [
        slot(9, "a"),
        slot(10, "a", "b", "c"),
        slot(11, "a", "b"),
        slot(12, "a", "b", "c"),
        slot(13, "a"),
    ]
    assert [s.hour for s in rank_slots(slots)] == [10, 12, 11]


def test_output_is_bounded_and_non_increasing():
    slots = [slot(h, *("x" * (h % 4 + 1))) for h in range(24)]
    ranked = rank_slots(slots)
    assert len(ranked) == 3
    counts = [s.attendance for s in ranked]
    assert counts == sorted(counts, reverse=True)


def test_fewer_than_three_returns_all():
    slots = [slot(9, "a", "b"), slot(10, "a", "b")]
    assert rank_slots(slots) == slots


def test_empty_input():
    assert rank_slots([]) == []


def test_custom_limit():
    slots = [slot(h, "a", "b") for h in range(5)]
    assert len(rank_slots(slots, limit=5)) == 5
    assert rank_slots(slots, limit=1) == slots[:1]


def test_new_york_and_london_best_times():
    team = [person("a", "Alice", "America/New_York"), person("b", "Bob", "Europe/London")]
    best = best_meeting_times(team, DAY)
    assert [s.time for s in best] == ["14:00", "15:00", "16:00"]
    assert all(s.attendance == 2 for s in best)


def test_new_york_and_tokyo_have_no_best_time():
    team = [person("a", "Alice", "America/New_York"), person("k", "Ken", "Asia/Tokyo")]
    assert best_meeting_times(team, DAY) == []


def test_adding_participant_keeps_existing_counts():
    pair = [person("a", "Alice", "America/New_York"), person("b", "Bob", "Europe/London")]
    trio = pair + [person("c", "Chloe", "Europe/Paris")]
    before = {s.time: s.attendance for s in generate_time_slots(pair, DAY)}
    after = {s.time: s.attendance for s in generate_time_slots(trio, DAY)}
    assert all(after[t] >= count for t, count in before.items())
    assert [s.time for s in best_meeting_times(trio, DAY)] == ["14:00", "15:00", "16:00"]
    assert all(s.attendance == 3 for s in best_meeting_times(trio, DAY))


@pytest.mark.parametrize("limit", [0, -1])
def test_limit_below_one_is_rejected(limit):
    with pytest.raises(ValueError):
        rank_slots([slot(9, "a", "b")], limit=limit)
