"""Catalog service for product operations.

High-level service that combines repository operations with
business logic for catalog management.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.catalog.repository import StorageConflictError, StorageError, transaction
from app.domain.entities import NewProduct, ProductPatch, ProductRecord
from app.domain.exceptions import (
    CatalogInternalError,
    ProductConflictError,
    ProductNotFoundError,
)
from app.domain.value_objects import ProductId

DEFAULT_LIMIT = 5
DEFAULT_OFFSET = 0


class CatalogService:
    """Service for catalog operations.

    Every public method runs in its own transaction. Callers receive
    ``ProductRecord`` values with images resolved to URL strings, or one
    of ``ProductNotFoundError``, ``ProductConflictError`` and
    ``CatalogInternalError``.

    Example usage:
        service = CatalogService(async_session_factory, logger)

        product = await service.create(NewProduct(title="Cotton Tee", stock=3))
        same = await service.find_one("cotton-tee")
        await service.update(product.id, ProductPatch(images=("a.jpg",)))
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        logger: Any = None,
    ) -> None:
        """Initialize service.

        Args:
            session_factory: Factory for database sessions.
            logger: Bound structlog logger used for failure reports.
        """
        self.session_factory = session_factory
        self.logger = logger if logger is not None else structlog.get_logger(__name__)

    async def create(self, new_product: NewProduct) -> ProductRecord:
        """Create a product and its images in one write.

        Args:
            new_product: Validated product fields and image URLs.

        Returns:
            The stored product.

        Raises:
            ProductConflictError: If title or slug is already taken.
            CatalogInternalError: On any other storage failure.
        """
        try:
            async with transaction(self.session_factory) as repo:
                product = await repo.add(new_product.column_values(), new_product.images)
        except StorageError as e:
            raise self._storage_failure(e, "create", title=new_product.title) from e

        record = product.to_record()
        self.logger.info("Product created", product_id=record.id, slug=record.slug)
        return record

    async def find_all(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ProductRecord]:
        """List products in stored order.

        Args:
            limit: Page size, defaults to 5.
            offset: Products to skip, defaults to 0.

        Returns:
            Up to ``limit`` products.
        """
        limit = DEFAULT_LIMIT if limit is None else limit
        offset = DEFAULT_OFFSET if offset is None else offset

        try:
            async with transaction(self.session_factory) as repo:
                products = await repo.find_page(limit=limit, offset=offset)
                return [product.to_record() for product in products]
        except StorageError as e:
            raise self._storage_failure(e, "find_all", limit=limit, offset=offset) from e

    async def find_one(self, term: str) -> ProductRecord:
        """Resolve a product by ID, then by slug or title.

        The ID lookup only runs when ``term`` is a UUID. The slug/title
        lookup (case-insensitive) runs whenever the ID lookup found nothing
        and ``term`` is not blank.

        Args:
            term: Product ID, slug or title.

        Returns:
            The matching product.

        Raises:
            ProductNotFoundError: If neither lookup matches.
        """
        try:
            async with transaction(self.session_factory) as repo:
                product = None
                product_id = ProductId.parse(term)
                if product_id is not None:
                    product = await repo.get_by_id(str(product_id))

                if product is None and term.strip():
                    product = await repo.get_by_slug_or_title(term)

                if product is None:
                    raise ProductNotFoundError(term)
                return product.to_record()
        except StorageError as e:
            raise self._storage_failure(e, "find_one", term=term) from e

    async def update(self, product_id: str, patch: ProductPatch) -> ProductRecord:
        """Apply a partial update, replacing images when new ones are given.

        The image replacement and the field update commit together or
        not at all.

        Args:
            product_id: ID of the product to update.
            patch: Fields to change; non-empty ``images`` replaces all images.

        Returns:
            The product as committed.

        Raises:
            ProductNotFoundError: If no product has this ID.
            ProductConflictError: If the new title or slug is taken.
            CatalogInternalError: On any other storage failure.
        """
        current = await self._get_by_id(product_id)
        candidate = current.merge(patch)

        try:
            async with transaction(self.session_factory) as repo:
                if patch.replaces_images:
                    await repo.replace_images(candidate.id, candidate.images)
                updated = await repo.update_fields(candidate.id, candidate.column_values())
                if updated == 0:
                    raise ProductNotFoundError(product_id)
        except StorageError as e:
            raise self._storage_failure(e, "update", product_id=product_id) from e

        self.logger.info(
            "Product updated",
            product_id=product_id,
            images_replaced=patch.replaces_images,
        )
        return await self.find_one(candidate.id)

    async def remove(self, term: str) -> int:
        """Delete a product and its images by ID.

        Args:
            term: Product ID.

        Returns:
            Number of deleted products (1).

        Raises:
            ProductNotFoundError: If term is not a UUID or no product has it.
        """
        product_id = ProductId.parse(term)
        if product_id is None:
            raise ProductNotFoundError(term)

        try:
            async with transaction(self.session_factory) as repo:
                affected = await repo.delete_by_id(str(product_id))
                if affected == 0:
                    raise ProductNotFoundError(term)
        except StorageError as e:
            raise self._storage_failure(e, "remove", term=term) from e

        self.logger.info("Product deleted", product_id=str(product_id))
        return affected

    async def delete_all(self) -> int:
        """Delete every product and image.

        Returns:
            Number of deleted products.

        Raises:
            CatalogInternalError: On storage failure.
        """
        try:
            async with transaction(self.session_factory) as repo:
                deleted = await repo.delete_all()
        except StorageError as e:
            raise self._storage_failure(e, "delete_all") from e

        self.logger.info("All products deleted", deleted=deleted)
        return deleted

    async def _get_by_id(self, product_id: str) -> ProductRecord:
        """Load a product by ID only.

        Raises:
            ProductNotFoundError: If the ID is malformed or unknown.
        """
        parsed = ProductId.parse(product_id)
        if parsed is None:
            raise ProductNotFoundError(product_id)

        try:
            async with transaction(self.session_factory) as repo:
                product = await repo.get_by_id(str(parsed))
                if product is None:
                    raise ProductNotFoundError(product_id)
                return product.to_record()
        except StorageError as e:
            raise self._storage_failure(e, "get_by_id", product_id=product_id) from e

    def _storage_failure(
        self,
        error: StorageError,
        operation: str,
        **context: Any,
    ) -> ProductConflictError | CatalogInternalError:
        """Translate a storage error for callers.

        Conflicts keep the constraint detail. Everything else is logged
        in full and replaced by an opaque internal error.
        """
        if isinstance(error, StorageConflictError):
            self.logger.warning(
                "Product uniqueness conflict",
                operation=operation,
                detail=error.detail,
                **context,
            )
            return ProductConflictError(error.detail)

        self.logger.error(
            "Catalog storage failure",
            operation=operation,
            error=error.detail,
            exc_info=error,
            **context,
        )
        return CatalogInternalError()
