"""Participant endpoints: add, remove and list with live local clocks."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..domain import schemas
from ..domain.errors import ParticipantNotFound
from ..domain.models import Participant
from ..scheduling.timezones import UTC, local_date, local_time, zone_label
from ..services.registry import ParticipantRegistry, new_participant
from .deps import get_registry

router = APIRouter(prefix="/participants", tags=["participants"])


def to_schema(participant: Participant, now: datetime) -> schemas.Participant:
    return schemas.Participant(
        id=participant.id,
        name=participant.name,
        timezone=participant.timezone,
        timezone_label=zone_label(participant.timezone),
        work_start=participant.work_start,
        work_end=participant.work_end,
        email=participant.email,
        local_time=local_time(now, participant.timezone),
        local_date=local_date(now, participant.timezone),
    )


@router.get("", response_model=List[schemas.Participant])
def list_participants(
    at: Optional[datetime] = Query(
        None, description="Instant for the local clocks; defaults to now"
    ),
    registry: ParticipantRegistry = Depends(get_registry),
) -> List[schemas.Participant]:
    now = at or datetime.now(UTC)
    return [to_schema(p, now) for p in registry.snapshot()]


@router.post(
    "", response_model=schemas.Participant, status_code=status.HTTP_201_CREATED
)
def add_participant(
    payload: schemas.ParticipantCreate,
    registry: ParticipantRegistry = Depends(get_registry),
) -> schemas.Participant:
    participant = registry.add(
        new_participant(
            name=payload.name,
            timezone=payload.timezone,
            work_start=payload.work_start,
            work_end=payload.work_end,
            email=payload.email,
        )
    )
    return to_schema(participant, datetime.now(UTC))


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_participant(
    participant_id: str,
    registry: ParticipantRegistry = Depends(get_registry),
) -> Response:
    try:
        registry.remove(participant_id)
    except ParticipantNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
