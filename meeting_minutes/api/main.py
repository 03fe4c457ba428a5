"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, meeting_minutes.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meeting_minutes.configs import get_settings
from meeting_minutes.core.exceptions import ConfigurationError
from meeting_minutes.observability.logger import configure_logging
from .routers import attendees_router, health_router, meetings_router

logger = logging.getLogger(__name__)


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Report missing connection settings without attempting recovery."""
    logger.critical("Configuration error", extra={"setting": exc.setting})
    return JSONResponse(status_code=500, content={"detail": exc.message})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Meeting Minutes API",
        description="Record, browse and edit meeting minutes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(meetings_router, prefix="/api/v1")
    app.include_router(attendees_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "meeting_minutes.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
