"""Meeting descriptions and calendar invite links for a chosen slot."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Sequence
from urllib.parse import quote

from ..domain.models import MeetingEvent, Participant, TimeSlot
from .timezones import UTC, local_date, local_time

MEETING_DURATION = timedelta(hours=1)
DEFAULT_TITLE = "Team Meeting"
DEFAULT_DOMAIN = "company.com"
DEFAULT_CALENDAR_URL = "https://calendar.google.com/calendar/render"

_WHITESPACE_RE = re.compile(r"\s+")


def attendee_identity(participant: Participant, domain: str = DEFAULT_DOMAIN) -> str:
    """Address to invite ``participant`` with.

    Falls back to the lower-cased, whitespace-free name at ``domain`` when no
    email is set. That fallback is a placeholder and not unique: two people
    whose names normalise the same way share an address.
    """
    if participant.email:
        return participant.email
    return _WHITESPACE_RE.sub("", participant.name.lower()) + "@" + domain


def describe(
    slot: TimeSlot,
    participants: Sequence[Participant],
    title: str = DEFAULT_TITLE,
    domain: str = DEFAULT_DOMAIN,
) -> MeetingEvent:
    """Build the one-hour meeting for ``slot``.

    The body lists every participant's local time at the start, including
    those outside their working window, so conflicts stay visible.
    """
    assert 0 <= slot.hour < 24, slot.hour
    start = slot.start
    end = start + MEETING_DURATION

    lines = [f"Meeting with: {', '.join(slot.participants)}", "", "Local times:"]
    for p in participants:
        lines.append(
            f"• {p.name}: {local_time(start, p.timezone)} ({local_date(start, p.timezone)})"
        )

    available = set(slot.participant_ids)
    attendees = tuple(
        attendee_identity(p, domain) for p in participants if p.id in available
    )
    return MeetingEvent(
        title=title,
        body="\n".join(lines),
        attendees=attendees,
        start=start,
        end=end,
    )


def format_utc(instant: datetime) -> str:
    """Compact UTC stamp, e.g. ``20240115T140000Z``."""
    if instant.tzinfo is None:
        instant = UTC.localize(instant)
    return instant.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")


def _encode(value: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    return quote(value, safe="!~*'()")


def calendar_url(event: MeetingEvent, base_url: str = DEFAULT_CALENDAR_URL) -> str:
    """Google Calendar "new event" template link for ``event``."""
    return (
        f"{base_url}?action=TEMPLATE"
        f"&text={_encode(event.title)}"
        f"&dates={format_utc(event.start)}/{format_utc(event.end)}"
        f"&details={_encode(event.body)}"
        f"&add={_encode(','.join(event.attendees))}"
    )
