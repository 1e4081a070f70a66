"""Slot, overlap and suggestion endpoints over the current participants."""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

from fastapi import APIRouter, Depends, Path

from ..core.config import Settings, get_settings
from ..domain import schemas
from ..domain.models import Participant, TimeSlot
from ..scheduling.events import calendar_url, describe
from ..scheduling.ranking import best_meeting_times
from ..scheduling.slots import availability_row, generate_time_slots, iter_hour_slots
from ..scheduling.timezones import local_date, local_time, zone_label
from ..services.registry import ParticipantRegistry
from .deps import get_reference_day, get_registry

router = APIRouter(prefix="/schedule", tags=["schedule"])

NO_PARTICIPANTS = "Add at least 2 participants to find overlapping meeting times."
NO_OVERLAP = (
    "No overlapping time slots found. "
    "Try adjusting work hours or adding more participants."
)


def _event_schema(
    slot: TimeSlot, participants: Sequence[Participant], settings: Settings
) -> schemas.MeetingEvent:
    event = describe(
        slot,
        participants,
        title=settings.MEETING_TITLE,
        domain=settings.ATTENDEE_DOMAIN,
    )
    return schemas.MeetingEvent(
        title=event.title,
        body=event.body,
        attendees=list(event.attendees),
        start=event.start,
        end=event.end,
        calendar_url=calendar_url(event, settings.CALENDAR_URL),
    )


@router.get("/slots", response_model=List[schemas.TimeSlot])
def list_slots(
    reference_day: date = Depends(get_reference_day),
    registry: ParticipantRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> List[schemas.TimeSlot]:
    slots = generate_time_slots(
        registry.snapshot(), reference_day, settings.REFERENCE_TZ
    )
    return [
        schemas.TimeSlot(
            time=s.time,
            start=s.start,
            participants=list(s.participants),
            available_count=s.attendance,
        )
        for s in slots
    ]


@router.get("/overlap", response_model=List[schemas.OverlapRow])
def overlap(
    reference_day: date = Depends(get_reference_day),
    registry: ParticipantRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> List[schemas.OverlapRow]:
    return [
        schemas.OverlapRow(
            participant_id=p.id,
            name=p.name,
            timezone=p.timezone,
            timezone_label=zone_label(p.timezone),
            hours=[
                schemas.HourCell(**cell)
                for cell in availability_row(p, reference_day, settings.REFERENCE_TZ)
            ],
        )
        for p in registry.snapshot()
    ]


@router.get("/suggestions", response_model=schemas.Suggestions)
def suggestions(
    reference_day: date = Depends(get_reference_day),
    registry: ParticipantRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> schemas.Suggestions:
    participants = registry.snapshot()
    ranked = best_meeting_times(
        participants,
        reference_day,
        settings.REFERENCE_TZ,
        settings.SUGGESTION_LIMIT,
    )

    options = []
    for index, slot in enumerate(ranked, start=1):
        available = set(slot.participant_ids)
        options.append(
            schemas.Suggestion(
                option=index,
                time=slot.time,
                participants=list(slot.participants),
                available_count=slot.attendance,
                total_participants=len(participants),
                local_times=[
                    schemas.LocalTime(
                        participant_id=p.id,
                        name=p.name,
                        local_time=local_time(slot.start, p.timezone),
                        local_date=local_date(slot.start, p.timezone),
                        available=p.id in available,
                    )
                    for p in participants
                ],
                calendar_url=_event_schema(slot, participants, settings).calendar_url,
            )
        )

    message = None
    if not participants:
        message = NO_PARTICIPANTS
    elif not options:
        message = NO_OVERLAP

    return schemas.Suggestions(
        reference_day=reference_day,
        reference_tz=settings.REFERENCE_TZ,
        participant_count=len(participants),
        suggestions=options,
        message=message,
    )


@router.get("/slots/{hour}/event", response_model=schemas.MeetingEvent)
def slot_event(
    hour: int = Path(..., ge=0, le=23),
    reference_day: date = Depends(get_reference_day),
    registry: ParticipantRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> schemas.MeetingEvent:
    participants = registry.snapshot()
    slots = list(iter_hour_slots(participants, reference_day, settings.REFERENCE_TZ))
    return _event_schema(slots[hour], participants, settings)
