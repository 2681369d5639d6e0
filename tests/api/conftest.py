"""Shared fixtures for API tests."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.api.products import get_service as get_catalog_service
from app.api.seed import get_service as get_seed_service
from app.catalog.seed import SeedService
from app.catalog.service import CatalogService
from app.domain.entities import ProductRecord
from app.domain.value_objects import Gender
from app.main import app


@pytest.fixture
def mock_catalog() -> MagicMock:
    """Create a mock catalog service."""
    service = MagicMock(spec=CatalogService)

    # Make all methods async
    service.create = AsyncMock()
    service.find_all = AsyncMock()
    service.find_one = AsyncMock()
    service.update = AsyncMock()
    service.remove = AsyncMock()
    service.delete_all = AsyncMock()

    return service


@pytest.fixture
def mock_seed() -> MagicMock:
    """Create a mock seed service."""
    service = MagicMock(spec=SeedService)
    service.execute_seed = AsyncMock(return_value="Seed executed")
    return service


@pytest.fixture
def client(mock_catalog: MagicMock, mock_seed: MagicMock) -> Generator[TestClient, None, None]:
    """Create test client with mocked services."""
    app.dependency_overrides[get_catalog_service] = lambda: mock_catalog
    app.dependency_overrides[get_seed_service] = lambda: mock_seed
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product() -> ProductRecord:
    """Create a sample product record."""
    return ProductRecord(
        id=str(uuid4()),
        title="Men's Chill Crew Neck Sweatshirt",
        slug="mens_chill_crew_neck_sweatshirt",
        price=75,
        description="Midweight crew neck sweatshirt",
        stock=7,
        sizes=("S", "M", "L"),
        gender=Gender.MEN,
        tags=("sweatshirt",),
        images=("1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"),
    )
