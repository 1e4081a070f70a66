"""HTTP routers."""

from fastapi import APIRouter

from . import health, participants, schedule, timezones

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(timezones.router)
api_router.include_router(participants.router)
api_router.include_router(schedule.router)
