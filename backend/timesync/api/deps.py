"""Shared FastAPI dependencies."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from fastapi import Depends, Query, Request

from ..core.config import Settings, get_settings
from ..scheduling.timezones import get_zone
from ..services.registry import ParticipantRegistry


def get_registry(request: Request) -> ParticipantRegistry:
    return request.app.state.registry


def get_reference_day(
    day: Optional[date] = Query(
        None, description="Reference day; defaults to today in the reference zone"
    ),
    settings: Settings = Depends(get_settings),
) -> date:
    if day is not None:
        return day
    return datetime.now(get_zone(settings.REFERENCE_TZ)).date()
