"""SQLAlchemy models for product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.entities import ProductRecord
from app.domain.value_objects import Gender, ProductId
from app.infrastructure.database import Base


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID string).
        title: Product title (unique).
        slug: URL handle (unique).
        price: Unit price.
        description: Product description.
        stock: Available quantity.
        sizes: Size labels as a JSON list.
        gender: One of men, women, kids, unisex.
        tags: Tags as a JSON list.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(ProductId.generate()),
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        order_by="ProductImage.id",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug}, title={self.title[:30]}...)>"

    def to_record(self) -> ProductRecord:
        """Convert to an immutable record with resolved images.

        Images must already be loaded.

        Returns:
            ProductRecord with image URLs in stored order.
        """
        return ProductRecord(
            id=self.id,
            title=self.title,
            slug=self.slug,
            price=self.price,
            description=self.description,
            stock=self.stock,
            sizes=tuple(self.sizes or ()),
            gender=Gender(self.gender),
            tags=tuple(self.tags or ()),
            images=tuple(image.url for image in self.images),
        )


class ProductImage(Base):
    """Image URL attached to a product.

    Attributes:
        id: Autoincrement identifier; image order follows it.
        url: Image URL.
        product_id: Owning product ID.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    product_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, url={self.url})>"
