"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: meeting_minutes.application.services
System role: Health check HTTP API
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from meeting_minutes.application.services import check_store_health


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db():
    """Database health check; 503 when the store read fails."""
    if await check_store_health():
        return HealthResponse(status="healthy", message="Database connection OK")
    return JSONResponse(
        status_code=503,
        content=HealthResponse(status="unhealthy", message="Database unreachable").model_dump(),
    )
