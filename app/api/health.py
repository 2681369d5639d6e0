"""Health check endpoints.

``/health`` answers as long as the process is up. ``/ready`` also
checks that the catalog database accepts queries.
"""

import structlog
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.infrastructure.config import settings
from app.infrastructure.database import engine

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response."""

    status: str
    database: str


def get_engine() -> AsyncEngine:
    """Engine probed by the readiness check."""
    return engine


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    db_engine: AsyncEngine = Depends(get_engine),
) -> ReadinessResponse:
    """Report ready only when the database answers ``SELECT 1``.

    Returns:
        Readiness status, with HTTP 503 when the database is unreachable.
    """
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Database not reachable", error=str(e))
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="not_ready", database="unavailable")

    return ReadinessResponse(status="ready", database="ok")
