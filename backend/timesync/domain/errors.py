"""Domain exceptions.

Validation failures subclass :class:`ValueError` so pydantic validators can
raise them directly and FastAPI reports them as 422 responses.
"""


class SchedulingError(Exception):
    """Base class for every error raised by the scheduling domain."""


class InvalidTimeZone(SchedulingError, ValueError):
    """The time-zone identifier is not known to the zone database."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown time zone: {zone!r}")
        self.zone = zone


class InvalidClockTime(SchedulingError, ValueError):
    """A wall-clock value is not a well-formed ``HH:MM`` pair."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Expected a HH:MM clock time, got {value!r}")
        self.value = value


class InvalidParticipant(SchedulingError, ValueError):
    """Participant data failed validation before creation."""


class ParticipantNotFound(SchedulingError, LookupError):
    """No participant with the given id is in the working set."""

    def __init__(self, participant_id: str) -> None:
        super().__init__(f"Participant {participant_id!r} not found")
        self.participant_id = participant_id
