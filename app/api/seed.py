"""Seed API endpoint.

Reloads the catalog with the built-in seed products.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, status

from app.api.schemas import ErrorResponse, SeedResponse
from app.catalog.seed import SeedService
from app.catalog.service import CatalogService
from app.infrastructure.database import async_session_factory

logger = structlog.get_logger()

router = APIRouter(prefix="/seed", tags=["Seed"])


def get_service(request: Request) -> SeedService:
    """Get seed service with request-scoped logger."""
    request_id = getattr(request.state, "request_id", None)
    bound = logger.bind(service="seed", request_id=request_id)
    return SeedService(CatalogService(async_session_factory, logger=bound), logger=bound)


@router.get(
    "",
    response_model=SeedResponse,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
    summary="Seed catalog",
    description="Delete every product and load the seed products.",
)
async def execute_seed(
    service: Annotated[SeedService, Depends(get_service)],
) -> SeedResponse:
    """Reload the seed data.

    Returns:
        Confirmation message.
    """
    message = await service.execute_seed()
    return SeedResponse(message=message)
