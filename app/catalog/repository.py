"""Product repository for database operations.

Provides the persistence operations the catalog service needs, a
transaction scope, and storage errors that are already classified as
conflicts or generic failures.
"""

from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.catalog.models import Product, ProductImage

UNIQUE_VIOLATION = "23505"


# ============================================================================
# Storage Errors
# ============================================================================


class StorageError(Exception):
    """Raised when a storage operation fails.

    Attributes:
        detail: Full error text from the database driver.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class StorageConflictError(StorageError):
    """Raised when a write violates a uniqueness constraint."""

    pass


def _is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an integrity error is a unique-constraint violation."""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION
    # SQLite reports no SQLSTATE
    return "UNIQUE constraint failed" in str(orig)


def _error_detail(error: SQLAlchemyError) -> str:
    """Extract the most specific message the driver provides."""
    orig = getattr(error, "orig", None)
    if orig is None:
        return str(error)
    cause = orig.__cause__
    detail = getattr(orig, "detail", None) or getattr(cause, "detail", None)
    return detail or str(orig)


def classify_error(error: SQLAlchemyError) -> StorageError:
    """Convert a SQLAlchemy error into a storage error.

    Args:
        error: Error raised by SQLAlchemy.

    Returns:
        StorageConflictError for unique violations, StorageError otherwise.
    """
    if isinstance(error, IntegrityError) and _is_unique_violation(error):
        return StorageConflictError(_error_detail(error))
    return StorageError(_error_detail(error))


# ============================================================================
# Repository
# ============================================================================


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products and their images.
    Instances are bound to a session opened by ``transaction``.

    Example usage:
        async with transaction(async_session_factory) as repo:
            product = await repo.get_by_id(product_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def add(self, values: dict[str, Any], image_urls: Iterable[str] = ()) -> Product:
        """Insert a product together with its images.

        Args:
            values: Column values for the product.
            image_urls: Image URLs in display order.

        Returns:
            Saved product with images loaded.
        """
        product = Product(
            **values,
            images=[ProductImage(url=url) for url in image_urls],
        )
        self.session.add(product)
        await self.session.flush()
        return product

    async def add_all(self, definitions: Iterable[dict[str, Any]]) -> list[Product]:
        """Insert many products at once.

        Each definition holds product column values plus an ``images`` list
        of URL strings.

        Args:
            definitions: Product definitions.

        Returns:
            Saved products.
        """
        products = []
        for definition in definitions:
            values = dict(definition)
            urls = values.pop("images", [])
            products.append(
                Product(**values, images=[ProductImage(url=url) for url in urls])
            )
        self.session.add_all(products)
        await self.session.flush()
        return products

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product with images if found, None otherwise.
        """
        query = (
            select(Product)
            .where(Product.id == product_id)
            .options(selectinload(Product.images))
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_slug_or_title(self, term: str) -> Product | None:
        """Get the product whose slug or title equals term, ignoring case.

        Args:
            term: Slug or title.

        Returns:
            Product with images if found, None otherwise.
        """
        needle = term.lower()
        query = (
            select(Product)
            .where(
                or_(
                    func.lower(Product.slug) == needle,
                    func.lower(Product.title) == needle,
                )
            )
            .order_by(Product.created_at, Product.id)
            .limit(1)
            .options(selectinload(Product.images))
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_page(self, limit: int, offset: int = 0) -> Sequence[Product]:
        """Find products in stored order.

        Args:
            limit: Maximum results.
            offset: Number of products to skip.

        Returns:
            Sequence of products with images.
        """
        query = (
            select(Product)
            .order_by(Product.created_at, Product.id)
            .limit(limit)
            .offset(offset)
            .options(selectinload(Product.images))
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def replace_images(self, product_id: str, image_urls: Iterable[str]) -> None:
        """Delete every image of a product and insert new ones in order.

        Args:
            product_id: Owning product ID.
            image_urls: New image URLs in display order.
        """
        await self.session.execute(
            delete(ProductImage).where(ProductImage.product_id == product_id)
        )
        self.session.add_all(
            [ProductImage(product_id=product_id, url=url) for url in image_urls]
        )
        await self.session.flush()

    async def update_fields(self, product_id: str, values: dict[str, Any]) -> int:
        """Overwrite product columns.

        Args:
            product_id: Product ID.
            values: Column values to store.

        Returns:
            Number of updated rows.
        """
        result = await self.session.execute(
            update(Product).where(Product.id == product_id).values(**values)
        )
        return result.rowcount

    async def delete_by_id(self, product_id: str) -> int:
        """Delete a product and its images.

        Args:
            product_id: Product ID.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(
            delete(ProductImage).where(ProductImage.product_id == product_id)
        )
        result = await self.session.execute(
            delete(Product).where(Product.id == product_id)
        )
        return result.rowcount

    async def delete_all(self) -> int:
        """Delete every product and every image.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(delete(ProductImage))
        result = await self.session.execute(delete(Product))
        return result.rowcount


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[ProductRepository]:
    """Run repository calls in one transaction.

    Opens a session and begins a transaction on entry, commits when the
    block finishes, rolls back if it raises, and always closes the session.
    SQLAlchemy errors leave the block as ``StorageError`` or
    ``StorageConflictError``; other exceptions pass through unchanged.

    Args:
        session_factory: Factory for new sessions.

    Yields:
        Repository bound to the transaction's session.
    """
    async with session_factory() as session:
        try:
            async with session.begin():
                yield ProductRepository(session)
        except SQLAlchemyError as e:
            raise classify_error(e) from e
