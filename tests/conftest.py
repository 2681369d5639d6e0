"""Shared fixtures for catalog tests.

Storage-backed tests run against an in-memory SQLite database so they
exercise the real repository, transactions and constraints.
"""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.catalog.service import CatalogService
from app.domain.entities import NewProduct
from app.domain.value_objects import Gender
from app.infrastructure.database import create_session_factory, create_tables

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return create_session_factory(engine)


@pytest.fixture
def logger() -> MagicMock:
    """Mock structlog logger."""
    return MagicMock()


@pytest.fixture
def service(
    session_factory: async_sessionmaker[AsyncSession],
    logger: MagicMock,
) -> CatalogService:
    """Catalog service backed by the test database."""
    return CatalogService(session_factory, logger=logger)


def make_new_product(
    title: str = "Cotton Crew Tee",
    slug: str | None = None,
    images: tuple[str, ...] = (),
    **overrides,
) -> NewProduct:
    """Create valid create input."""
    values = {
        "title": title,
        "slug": slug,
        "price": 25.0,
        "description": "Soft cotton tee",
        "stock": 10,
        "sizes": ("S", "M", "L"),
        "gender": Gender.UNISEX,
        "tags": ("shirt",),
        "images": images,
    }
    values.update(overrides)
    return NewProduct(**values)


@pytest.fixture
def new_product():
    """Factory for create input."""
    return make_new_product
