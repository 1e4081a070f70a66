"""Time-zone options offered to clients."""

from typing import List

from fastapi import APIRouter

from ..domain import schemas
from ..scheduling.timezones import TIMEZONES

router = APIRouter(tags=["timezones"])


@router.get("/timezones", response_model=List[schemas.TimeZoneOption])
def list_timezones() -> List[schemas.TimeZoneOption]:
    return [schemas.TimeZoneOption(value=v, label=l) for v, l in TIMEZONES]
