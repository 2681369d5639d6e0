"""Product API endpoints.

Provides endpoints for creating, listing, looking up, updating and
deleting catalog products.
"""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query, Request, status

from app.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductDeleteResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from app.catalog.service import DEFAULT_OFFSET, CatalogService
from app.infrastructure.config import settings
from app.infrastructure.database import async_session_factory

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(request: Request) -> CatalogService:
    """Get catalog service with request-scoped logger."""
    request_id = getattr(request.state, "request_id", None)
    return CatalogService(
        async_session_factory,
        logger=logger.bind(service="catalog", request_id=request_id),
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Create product",
    description="Create a product together with its images.",
)
async def create_product(
    request: ProductCreateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Create a product.

    The slug is derived from the title when not supplied.

    Args:
        request: Product fields and image URLs.
        service: Catalog service.

    Returns:
        Created product.
    """
    record = await service.create(request.to_domain())
    return ProductResponse.from_record(record)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
    description="Get a page of products in stored order.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    limit: int = Query(
        default=settings.default_page_limit, ge=1, description="Maximum number of products"
    ),
    offset: int = Query(default=DEFAULT_OFFSET, ge=0, description="Products to skip"),
) -> list[ProductResponse]:
    """List products.

    Args:
        service: Catalog service.
        limit: Page size.
        offset: Products to skip.

    Returns:
        Products with image URLs.
    """
    records = await service.find_all(limit=limit, offset=offset)
    return [ProductResponse.from_record(record) for record in records]


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Find a product by ID, slug or title.",
)
async def get_product(
    term: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by ID, slug or title.

    Slug and title matching ignores case.

    Args:
        term: Product ID, slug or title.
        service: Catalog service.

    Returns:
        Product details.
    """
    record = await service.find_one(term)
    return ProductResponse.from_record(record)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Update product",
    description="Partially update a product. A non-empty image list replaces all images.",
)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Update a product.

    Args:
        product_id: Product ID.
        request: Fields to change.
        service: Catalog service.

    Returns:
        Updated product.
    """
    record = await service.update(str(product_id), request.to_domain())
    return ProductResponse.from_record(record)


@router.delete(
    "/{product_id}",
    response_model=ProductDeleteResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
    description="Delete a product and its images.",
)
async def delete_product(
    product_id: UUID,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductDeleteResponse:
    """Delete a product.

    Args:
        product_id: Product ID.
        service: Catalog service.

    Returns:
        Number of deleted products.
    """
    affected = await service.remove(str(product_id))
    return ProductDeleteResponse(affected=affected)
