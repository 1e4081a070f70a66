"""Core domain entities represented as immutable dataclasses.

The scheduling functions only ever read these values; a fresh set of
``TimeSlot`` objects is derived on every query and never cached.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Participant:
    """Team member with a working window in their own time zone.

    ``work_start`` and ``work_end`` are inclusive ``HH:MM`` wall-clock values.
    A window whose end is earlier than its start does not wrap past midnight;
    it simply never matches.

    ``email`` is the explicit attendee identity. When it is missing an
    identity is derived from ``name`` for convenience only.

    Example:
        >>> Participant(
        ...     id="p1",
        ...     name="Alice",
        ...     timezone="America/New_York",
        ...     work_start="09:00",
        ...     work_end="17:00",
        ... )
    """

    id: str
    name: str
    timezone: str
    work_start: str = "09:00"
    work_end: str = "17:00"
    email: Optional[str] = None


@dataclass(frozen=True)
class TimeSlot:
    """One whole-hour candidate on the reference day.

    ``participants`` holds display names in participant-list order and may
    contain duplicates; ``participant_ids`` is parallel to it.

    Example:
        >>> TimeSlot(
        ...     time="14:00",
        ...     hour=14,
        ...     start=datetime(2024, 1, 15, 14, 0, tzinfo=pytz.UTC),
        ...     participants=("Alice", "Bob"),
        ...     participant_ids=("p1", "p2"),
        ... )
    """

    time: str
    hour: int
    start: datetime
    participants: Tuple[str, ...] = ()
    participant_ids: Tuple[str, ...] = ()

    @property
    def attendance(self) -> int:
        return len(self.participants)


@dataclass(frozen=True)
class MeetingEvent:
    """One-hour meeting ready to hand to a calendar.

    Example:
        >>> MeetingEvent(
        ...     title="Team Meeting",
        ...     body="Meeting with: Alice",
        ...     attendees=("alice@company.com",),
        ...     start=datetime(2024, 1, 15, 14, 0, tzinfo=pytz.UTC),
        ...     end=datetime(2024, 1, 15, 15, 0, tzinfo=pytz.UTC),
        ... )
    """

    title: str
    body: str
    attendees: Tuple[str, ...]
    start: datetime
    end: datetime
