"""Product Catalog Service.

Provides product storage, lookup, transactional updates and seeding.
"""

from app.catalog.models import Product, ProductImage
from app.catalog.repository import (
    ProductRepository,
    StorageConflictError,
    StorageError,
    transaction,
)
from app.catalog.seed import SEED_PRODUCTS, SeedService
from app.catalog.service import CatalogService

__all__ = [
    # Models
    "Product",
    "ProductImage",
    # Repository
    "ProductRepository",
    "StorageConflictError",
    "StorageError",
    "transaction",
    # Service
    "CatalogService",
    # Seed
    "SEED_PRODUCTS",
    "SeedService",
]
