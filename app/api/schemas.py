"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
"""

from pydantic import BaseModel, Field

from app.domain.entities import NewProduct, ProductPatch, ProductRecord
from app.domain.value_objects import Gender


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    title: str = Field(..., min_length=1, description="Product title (unique)")
    price: float | None = Field(default=None, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    slug: str | None = Field(
        default=None,
        min_length=1,
        description="URL handle, derived from the title when omitted",
    )
    stock: int = Field(..., ge=0, description="Units available")
    sizes: list[str] = Field(..., description="Size labels")
    gender: Gender = Field(..., description="Target audience")
    tags: list[str] = Field(..., description="Product tags")
    images: list[str] = Field(default_factory=list, description="Image URLs in order")

    def to_domain(self) -> NewProduct:
        """Convert to the service input."""
        return NewProduct(
            title=self.title,
            price=self.price,
            description=self.description,
            slug=self.slug,
            stock=self.stock,
            sizes=tuple(self.sizes),
            gender=self.gender,
            tags=tuple(self.tags),
            images=tuple(self.images),
        )


class ProductUpdateRequest(BaseModel):
    """Request to partially update a product.

    Every field is optional. A non-empty ``images`` list replaces all
    existing images.
    """

    title: str | None = Field(default=None, min_length=1, description="Product title")
    price: float | None = Field(default=None, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    slug: str | None = Field(default=None, min_length=1, description="URL handle")
    stock: int | None = Field(default=None, ge=0, description="Units available")
    sizes: list[str] | None = Field(default=None, description="Size labels")
    gender: Gender | None = Field(default=None, description="Target audience")
    tags: list[str] | None = Field(default=None, description="Product tags")
    images: list[str] | None = Field(default=None, description="Replacement image URLs")

    def to_domain(self) -> ProductPatch:
        """Convert to the service patch."""
        return ProductPatch(
            title=self.title,
            price=self.price,
            description=self.description,
            slug=self.slug,
            stock=self.stock,
            sizes=tuple(self.sizes) if self.sizes is not None else None,
            gender=self.gender,
            tags=tuple(self.tags) if self.tags is not None else None,
            images=tuple(self.images) if self.images is not None else None,
        )


class ProductResponse(BaseModel):
    """A product with its images as URL strings."""

    id: str = Field(..., description="Unique product identifier")
    title: str = Field(..., description="Product title")
    slug: str = Field(..., description="URL handle")
    price: float = Field(..., description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    stock: int = Field(..., description="Units available")
    sizes: list[str] = Field(default_factory=list, description="Size labels")
    gender: Gender = Field(..., description="Target audience")
    tags: list[str] = Field(default_factory=list, description="Product tags")
    images: list[str] = Field(default_factory=list, description="Image URLs in order")

    @classmethod
    def from_record(cls, record: ProductRecord) -> "ProductResponse":
        """Build a response from a service record."""
        return cls(**record.to_dict())


class ProductDeleteResponse(BaseModel):
    """Result of deleting a product."""

    affected: int = Field(..., description="Number of deleted products")


# ============================================================================
# Seed Schemas
# ============================================================================


class SeedResponse(BaseModel):
    """Result of reloading the seed data."""

    message: str = Field(..., description="Outcome message")
