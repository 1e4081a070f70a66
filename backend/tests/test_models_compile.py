"""Smoke tests for domain models and schemas."""

from datetime import datetime
from pathlib import Path
import sys

import pytest
import pytz
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))
from timesync.domain import models, schemas  # noqa: E402


def test_models_and_schemas_compile() -> None:
    """Instantiate domain models and pydantic schemas."""

    start = datetime(2024, 1, 15, 14, 0, tzinfo=pytz.UTC)
    participant = models.Participant(
        id="p1", name="Alice", timezone="America/New_York"
    )
    slot = models.TimeSlot(
        time="14:00",
        hour=14,
        start=start,
        participants=("Alice",),
        participant_ids=("p1",),
    )
    event = models.MeetingEvent(
        title="Team Meeting",
        body="Meeting with: Alice",
        attendees=("alice@company.com",),
        start=start,
        end=datetime(2024, 1, 15, 15, 0, tzinfo=pytz.UTC),
    )

    schema_create = schemas.ParticipantCreate(
        name="Alice", timezone="America/New_York"
    )
    schema_slot = schemas.TimeSlot(
        time="14:00", start=start, participants=["Alice"], available_count=1
    )
    schema_cell = schemas.HourCell(
        hour=14, time="14:00", local_time="09:00", is_working=True
    )

    assert participant.work_start == "09:00"
    assert participant.work_end == "17:00"
    assert slot.attendance == 1
    assert event.attendees == ("alice@company.com",)
    assert schema_create.work_start == "09:00"
    assert all([schema_slot, schema_cell])


def test_models_are_immutable() -> None:
    participant = models.Participant(id="p1", name="Alice", timezone="UTC")
    with pytest.raises(AttributeError):
        participant.name = "Bob"  # type: ignore[misc]


def test_participant_create_normalizes_fields() -> None:
    payload = schemas.ParticipantCreate(
        name="  Alice ",
        timezone="Europe/London",
        work_start="9:00",
        work_end="17:30",
    )
    assert payload.name == "Alice"
    assert payload.work_start == "09:00"
    assert payload.work_end == "17:30"


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"timezone": "Mars/Olympus_Mons"},
        {"work_start": "25:00"},
        {"work_end": "noon"},
        {"email": "not-an-email"},
    ],
)
def test_participant_create_rejects_bad_input(overrides) -> None:
    data = {"name": "Alice", "timezone": "Europe/London"}
    data.update(overrides)
    with pytest.raises(ValidationError):
        schemas.ParticipantCreate(**data)
