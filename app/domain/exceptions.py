"""Domain exceptions.

Errors surfaced by the catalog to its callers. The storage layer raises its
own typed errors (see ``app.catalog.repository``) which the catalog service
translates into these.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class ProductNotFoundError(CatalogError):
    """Raised when a lookup, update or delete target does not exist."""

    def __init__(self, term: str) -> None:
        """Initialize product not found error.

        Args:
            term: Identifier, slug or title that was searched for.
        """
        super().__init__(
            f"Product not found with term: {term}",
            details={"term": term},
        )
        self.term = term


class ProductConflictError(CatalogError):
    """Raised when a write violates title or slug uniqueness."""

    def __init__(self, detail: str) -> None:
        """Initialize product conflict error.

        Args:
            detail: Constraint detail reported by storage.
        """
        super().__init__(detail, details={"constraint": detail})
        self.detail = detail


class CatalogInternalError(CatalogError):
    """Raised for any other storage failure.

    The message never carries storage detail. The underlying error is
    logged by the service before this is raised.
    """

    def __init__(self, message: str = "Unexpected error, check server logs") -> None:
        """Initialize internal error.

        Args:
            message: Message safe to return to callers.
        """
        super().__init__(message)
