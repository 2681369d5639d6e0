"""Domain layer - Records, value objects and exceptions.

This module exports the core domain building blocks:

- **Records**: Immutable product data passed between layers
  (NewProduct, ProductPatch, ProductRecord)
- **Value Objects**: Immutable objects compared by value (Gender, ProductId, Slug)
- **Exceptions**: Errors the catalog reports to its callers

Example usage:
    from app.domain import ProductPatch, ProductRecord

    record = ProductRecord(id="...", title="Cotton Tee", slug="cotton-tee")
    candidate = record.merge(ProductPatch(stock=12))

    print(record.stock, candidate.stock)  # 0 12
"""

# Base classes
from app.domain.base import ValueObject

# Records
from app.domain.entities import NewProduct, ProductPatch, ProductRecord

# Exceptions
from app.domain.exceptions import (
    CatalogError,
    CatalogInternalError,
    DomainError,
    ProductConflictError,
    ProductNotFoundError,
)

# Value objects
from app.domain.value_objects import Gender, ProductId, Slug

__all__ = [
    # Base
    "ValueObject",
    # Records
    "NewProduct",
    "ProductPatch",
    "ProductRecord",
    # Exceptions
    "CatalogError",
    "CatalogInternalError",
    "DomainError",
    "ProductConflictError",
    "ProductNotFoundError",
    # Value objects
    "Gender",
    "ProductId",
    "Slug",
]
