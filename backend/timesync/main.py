"""Application entry point."""

from fastapi import FastAPI

from . import __version__
from .api import api_router
from .core.config import settings
from .core.logging import RequestIDMiddleware, init_logging
from .services.registry import ParticipantRegistry


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Every app gets its own empty participant registry.
    """
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(title="TimeSync", version=__version__)
    app.state.registry = ParticipantRegistry()
    app.add_middleware(RequestIDMiddleware)
    app.include_router(api_router)
    return app


app = create_app()
