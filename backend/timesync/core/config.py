"""Application configuration utilities."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    REFERENCE_TZ: str = "UTC"
    ATTENDEE_DOMAIN: str = "company.com"
    MEETING_TITLE: str = "Team Meeting"
    SUGGESTION_LIMIT: int = Field(3, ge=1, le=3)
    CALENDAR_URL: str = "https://calendar.google.com/calendar/render"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        REFERENCE_TZ=os.getenv("REFERENCE_TZ", "UTC"),
        ATTENDEE_DOMAIN=os.getenv("ATTENDEE_DOMAIN", "company.com"),
        MEETING_TITLE=os.getenv("MEETING_TITLE", "Team Meeting"),
        SUGGESTION_LIMIT=int(os.getenv("SUGGESTION_LIMIT", "3")),
        CALENDAR_URL=os.getenv(
            "CALENDAR_URL", "https://calendar.google.com/calendar/render"
        ),
    )


settings = get_settings()
