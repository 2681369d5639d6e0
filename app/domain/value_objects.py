"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

from app.domain.base import ValueObject


class Gender(str, Enum):
    """Audience a product is made for."""

    MEN = "men"
    WOMEN = "women"
    KIDS = "kids"
    UNISEX = "unisex"


# ============================================================================
# Typed Identifiers
# ============================================================================


@dataclass(frozen=True)
class ProductId(ValueObject):
    """Strongly-typed product identifier.

    Product IDs are UUIDs generated on creation and stored as their
    canonical string form.
    """

    value: UUID

    @classmethod
    def generate(cls) -> Self:
        """Generate a new product ID.

        Returns:
            New ProductId with random UUID.
        """
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create ProductId from string representation.

        Args:
            value: String UUID representation.

        Returns:
            ProductId instance.

        Only the hyphenated 8-4-4-4-12 form is accepted, in any case.

        Raises:
            ValueError: If value is not a canonical UUID.
        """
        parsed = UUID(value)
        if str(parsed) != value.lower():
            raise ValueError(f"Not a canonical UUID: {value!r}")
        return cls(value=parsed)

    @classmethod
    def parse(cls, value: str) -> Self | None:
        """Create ProductId if value is a UUID, otherwise return None.

        Args:
            value: Candidate identifier.

        Returns:
            ProductId, or None when value is not a canonical UUID.
        """
        try:
            return cls.from_string(value)
        except (ValueError, AttributeError, TypeError):
            return None

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            UUID as string.
        """
        return str(self.value)


# ============================================================================
# Slug
# ============================================================================


@dataclass(frozen=True)
class Slug(ValueObject):
    """URL-friendly product handle."""

    value: str

    @classmethod
    def from_title(cls, title: str) -> Self:
        """Derive a slug from a product title.

        Lowercases the title and turns every space and apostrophe into
        a hyphen: ``"Men's Tee"`` becomes ``"men-s-tee"``.

        Args:
            title: Product title.

        Returns:
            Derived slug.
        """
        return cls(value=title.lower().replace(" ", "-").replace("'", "-"))

    def __str__(self) -> str:
        return self.value
