"""In-memory working set of participants.

Nothing here outlives the process. A lock serialises changes so the
scheduling functions always see a complete snapshot.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, List, Optional

from ..domain.errors import InvalidParticipant, ParticipantNotFound
from ..domain.models import Participant
from ..scheduling.timezones import ensure_timezone
from ..scheduling.working_hours import normalize_clock

logger = logging.getLogger(__name__)


def new_participant(
    name: str,
    timezone: str,
    work_start: str = "09:00",
    work_end: str = "17:00",
    email: Optional[str] = None,
    participant_id: Optional[str] = None,
) -> Participant:
    """Validate the inputs and mint a participant with a fresh id.

    Raises:
        InvalidParticipant: empty name.
        InvalidTimeZone: zone unknown to pytz.
        InvalidClockTime: malformed ``work_start`` or ``work_end``.
    """
    name = (name or "").strip()
    if not name:
        raise InvalidParticipant("Participant name must not be empty")
    return Participant(
        id=participant_id or uuid.uuid4().hex,
        name=name,
        timezone=ensure_timezone(timezone),
        work_start=normalize_clock(work_start),
        work_end=normalize_clock(work_end),
        email=email or None,
    )


class ParticipantRegistry:
    """Ordered participants keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._participants: Dict[str, Participant] = {}

    def add(self, participant: Participant) -> Participant:
        with self._lock:
            self._participants[participant.id] = participant
        logger.info(
            "Added participant %s (%s, %s-%s)",
            participant.id, participant.timezone,
            participant.work_start, participant.work_end,
        )
        return participant

    def remove(self, participant_id: str) -> Participant:
        with self._lock:
            participant = self._participants.pop(participant_id, None)
        if participant is None:
            raise ParticipantNotFound(participant_id)
        logger.info("Removed participant %s", participant_id)
        return participant

    def snapshot(self) -> List[Participant]:
        with self._lock:
            return list(self._participants.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._participants)
