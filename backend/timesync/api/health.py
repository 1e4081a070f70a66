"""Health check endpoints."""

from fastapi import APIRouter, Depends

from .. import __version__
from ..services.registry import ParticipantRegistry
from .deps import get_registry

router = APIRouter(tags=["health"])


@router.get("/health")
def health(registry: ParticipantRegistry = Depends(get_registry)) -> dict:
    """Report liveness, version and the size of the working set."""
    return {"status": "ok", "version": __version__, "participants": len(registry)}
