"""
Health check endpoint.

The compiler has no external dependencies, so liveness is the whole story.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict

from mobile_schema.config import settings
from mobile_schema.models.schemas.core import MOBILE_SCHEMA_VERSION

router = APIRouter()


class HealthResponse(BaseModel):
    """Simple health check response model"""
    status: str
    service: str
    version: str
    schema_version: str
    timestamp: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "service": "Mobile Schema Compiler",
                "version": "1.0.0",
                "schema_version": "1.0.0",
                "timestamp": "2026-01-01T12:00:00Z"
            }
        }
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Basic health check",
)
async def health_check() -> HealthResponse:
    """Fast liveness check, no logging."""
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        schema_version=MOBILE_SCHEMA_VERSION,
        timestamp=datetime.now(timezone.utc)
    )
