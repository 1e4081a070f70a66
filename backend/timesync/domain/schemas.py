"""Pydantic models used for request and response bodies.

Request models reuse the domain validators so bad names, zones and clock
times are rejected with a 422 before any participant is created.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, field_validator

from ..scheduling.timezones import ensure_timezone
from ..scheduling.working_hours import normalize_clock


class ParticipantCreate(BaseModel):
    """New participant submitted by a client.

    Example:
        >>> ParticipantCreate(
        ...     name="Alice",
        ...     timezone="America/New_York",
        ...     work_start="09:00",
        ...     work_end="17:00",
        ... )
    """

    name: str
    timezone: str
    work_start: str = "09:00"
    work_end: str = "17:00"
    email: Optional[EmailStr] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        return ensure_timezone(v)

    @field_validator("work_start", "work_end")
    @classmethod
    def _clock_time(cls, v: str) -> str:
        return normalize_clock(v)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Alice",
                "timezone": "America/New_York",
                "work_start": "09:00",
                "work_end": "17:00",
            }
        }


class Participant(BaseModel):
    """Participant with their wall clock at the time of the request."""

    id: str
    name: str
    timezone: str
    timezone_label: str
    work_start: str
    work_end: str
    email: Optional[str] = None
    local_time: str
    local_date: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "3f1c2a",
                "name": "Alice",
                "timezone": "America/New_York",
                "timezone_label": "New York (EST/EDT)",
                "work_start": "09:00",
                "work_end": "17:00",
                "email": None,
                "local_time": "09:41",
                "local_date": "Mon, Jan 15",
            }
        }


class TimeZoneOption(BaseModel):
    value: str
    label: str

    class Config:
        frozen = True


class TimeSlot(BaseModel):
    """Qualifying hour with the names of who can attend."""

    time: str
    start: datetime
    participants: List[str]
    available_count: int

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "time": "14:00",
                "start": "2024-01-15T14:00:00+00:00",
                "participants": ["Alice", "Bob"],
                "available_count": 2,
            }
        }


class LocalTime(BaseModel):
    participant_id: str
    name: str
    local_time: str
    local_date: str
    available: bool

    class Config:
        frozen = True


class MeetingEvent(BaseModel):
    """Calendar-ready description of a one-hour meeting."""

    title: str
    body: str
    attendees: List[str]
    start: datetime
    end: datetime
    calendar_url: str

    class Config:
        frozen = True


class Suggestion(BaseModel):
    """Ranked option as shown to the team."""

    option: int
    time: str
    participants: List[str]
    available_count: int
    total_participants: int
    local_times: List[LocalTime]
    calendar_url: str

    class Config:
        frozen = True


class Suggestions(BaseModel):
    reference_day: date
    reference_tz: str
    participant_count: int
    suggestions: List[Suggestion]
    message: Optional[str] = None

    class Config:
        frozen = True


class HourCell(BaseModel):
    hour: int
    time: str
    local_time: str
    is_working: bool

    class Config:
        frozen = True


class OverlapRow(BaseModel):
    """One participant's 24-hour availability strip."""

    participant_id: str
    name: str
    timezone: str
    timezone_label: str
    hours: List[HourCell]

    class Config:
        frozen = True
