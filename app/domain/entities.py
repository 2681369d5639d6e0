"""Domain entities for the catalog.

Products travel through the service layer as immutable records. Partial
updates are expressed as a ``ProductPatch`` and applied with
``ProductRecord.merge``, which returns a new record and never mutates
the one it was called on.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from app.domain.value_objects import Gender, Slug

# Scalar columns a patch may change; images are handled separately.
PRODUCT_FIELDS = (
    "title",
    "slug",
    "price",
    "description",
    "stock",
    "sizes",
    "gender",
    "tags",
)


@dataclass(frozen=True)
class NewProduct:
    """Validated input for creating a product.

    Attributes:
        title: Product title (non-empty, unique).
        stock: Units available.
        sizes: Size labels in display order.
        gender: Target audience.
        tags: Free-form tags in display order.
        price: Unit price, zero when not supplied.
        description: Optional long description.
        slug: Optional handle, derived from title when missing.
        images: Image URLs in display order.
    """

    title: str
    stock: int = 0
    sizes: tuple[str, ...] = ()
    gender: Gender = Gender.UNISEX
    tags: tuple[str, ...] = ()
    price: float | None = None
    description: str | None = None
    slug: str | None = None
    images: tuple[str, ...] = ()

    def resolved_slug(self) -> str:
        """Return the explicit slug or one derived from the title."""
        if self.slug and self.slug.strip():
            return self.slug
        return str(Slug.from_title(self.title))

    def column_values(self) -> dict[str, Any]:
        """Column values for the products table."""
        return {
            "title": self.title,
            "slug": self.resolved_slug(),
            "price": self.price if self.price is not None else 0,
            "description": self.description,
            "stock": self.stock,
            "sizes": list(self.sizes),
            "gender": Gender(self.gender).value,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class ProductPatch:
    """Partial update for a product.

    ``None`` means "leave unchanged". An empty ``images`` tuple and a blank
    ``slug`` are treated the same as ``None``.
    """

    title: str | None = None
    slug: str | None = None
    price: float | None = None
    description: str | None = None
    stock: int | None = None
    sizes: tuple[str, ...] | None = None
    gender: Gender | None = None
    tags: tuple[str, ...] | None = None
    images: tuple[str, ...] | None = None

    @property
    def replaces_images(self) -> bool:
        return bool(self.images)

    def changes(self) -> dict[str, Any]:
        """Return the supplied scalar fields."""
        changes = {
            name: getattr(self, name)
            for name in PRODUCT_FIELDS
            if getattr(self, name) is not None
        }
        if "slug" in changes and not changes["slug"].strip():
            del changes["slug"]
        return changes


@dataclass(frozen=True)
class ProductRecord:
    """A stored product with its images resolved to URL strings.

    Attributes:
        id: Product identifier.
        title: Product title.
        slug: URL handle.
        price: Unit price.
        description: Long description, if any.
        stock: Units available.
        sizes: Size labels.
        gender: Target audience.
        tags: Tags.
        images: Image URLs in stored order.
    """

    id: str
    title: str
    slug: str
    price: float = 0
    description: str | None = None
    stock: int = 0
    sizes: tuple[str, ...] = ()
    gender: Gender = Gender.UNISEX
    tags: tuple[str, ...] = ()
    images: tuple[str, ...] = field(default=())

    def merge(self, patch: ProductPatch) -> "ProductRecord":
        """Apply a patch and return the candidate record.

        Args:
            patch: Fields to change.

        Returns:
            New record; ``self`` is left untouched.
        """
        changes = patch.changes()
        if "sizes" in changes:
            changes["sizes"] = tuple(changes["sizes"])
        if "tags" in changes:
            changes["tags"] = tuple(changes["tags"])
        if "gender" in changes:
            changes["gender"] = Gender(changes["gender"])
        if patch.replaces_images:
            changes["images"] = tuple(patch.images or ())
        return replace(self, **changes)

    def column_values(self) -> dict[str, Any]:
        """Column values for the products table (excluding id and images)."""
        return {
            "title": self.title,
            "slug": self.slug,
            "price": self.price,
            "description": self.description,
            "stock": self.stock,
            "sizes": list(self.sizes),
            "gender": Gender(self.gender).value,
            "tags": list(self.tags),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation with images as URL strings.
        """
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["gender"] = Gender(self.gender).value
        data["sizes"] = list(self.sizes)
        data["tags"] = list(self.tags)
        data["images"] = list(self.images)
        return data
