"""Seed data for the product catalog.

Provides a fixed set of apparel products and the service that reloads
them, replacing whatever the catalog currently holds.
"""

from typing import Any

import structlog

from app.catalog.repository import StorageError, transaction
from app.catalog.service import CatalogService
from app.domain.exceptions import CatalogInternalError
from app.domain.value_objects import Gender, Slug

# ============================================================================
# Seed Data
# ============================================================================

SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Men's Chill Crew Neck Sweatshirt",
        "description": "Midweight crew neck sweatshirt in brushed cotton fleece with ribbed cuffs and hem.",
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        "stock": 7,
        "price": 75,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "mens_chill_crew_neck_sweatshirt",
        "tags": ["sweatshirt"],
        "gender": Gender.MEN,
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": "Relaxed shirt jacket with diamond quilting and a snap front, lined for cool mornings.",
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
        "stock": 5,
        "price": 200,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "slug": "men_quilted_shirt_jacket",
        "tags": ["jacket"],
        "gender": Gender.MEN,
    },
    {
        "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
        "description": "Lightweight bomber with a water-repellent shell, zip pockets and a rib-knit collar.",
        "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
        "stock": 10,
        "price": 130,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "slug": "men_raven_lightweight_zip_up_bomber_jacket",
        "tags": ["shirt"],
        "gender": Gender.MEN,
    },
    {
        "title": "Men's Turbine Long Sleeve Tee",
        "description": "Long sleeve tee in soft combed cotton with a small chest print.",
        "images": ["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
        "stock": 50,
        "price": 45,
        "sizes": ["XS", "S", "M", "L"],
        "slug": "men_turbine_long_sleeve_tee",
        "tags": ["shirt"],
        "gender": Gender.MEN,
    },
    {
        "title": "Men's Turbine Short Sleeve Tee",
        "description": "Everyday short sleeve tee in soft combed cotton with a small chest print.",
        "images": ["1741416-00-A_0_2000.jpg", "1741416-00-A_1.jpg"],
        "stock": 50,
        "price": 40,
        "sizes": ["M", "L", "XL", "XXL"],
        "slug": "men_turbine_short_sleeve_tee",
        "tags": ["shirt"],
        "gender": Gender.MEN,
    },
    {
        "title": "Women's Cropped Puffer Hoodie",
        "description": "Cropped puffer with a fitted hood, channel quilting and recycled insulation.",
        "images": ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
        "stock": 10,
        "price": 130,
        "sizes": ["XS", "S", "M"],
        "slug": "women_cropped_puffer_hoodie",
        "tags": ["hoodie"],
        "gender": Gender.WOMEN,
    },
    {
        "title": "Women's Chill Half-Zip Cropped Hoodie",
        "description": "Half-zip hoodie in heavyweight fleece with a cropped boxy fit.",
        "images": ["1740226-00-A_0_2000.jpg", "1740226-00-A_1.jpg"],
        "stock": 10,
        "price": 130,
        "sizes": ["XS", "S", "M", "XXL"],
        "slug": "women_chill_half_zip_cropped_hoodie",
        "tags": ["hoodie"],
        "gender": Gender.WOMEN,
    },
    {
        "title": "Women's Racing Stripe Tank",
        "description": "Slim tank in stretch rib with contrast stripes down the sides.",
        "images": ["1741441-00-A_0_2000.jpg", "1741441-00-A_1.jpg"],
        "stock": 10,
        "price": 35,
        "sizes": ["XS", "S", "M", "L", "XL"],
        "slug": "women_racing_stripe_tank",
        "tags": ["shirt"],
        "gender": Gender.WOMEN,
    },
    {
        "title": "Kids Cybertruck Long Sleeve Tee",
        "description": "Long sleeve cotton tee with a glow-in-the-dark graphic on the back.",
        "images": ["1742694-00-A_1_2000.jpg", "1742694-00-A_3.jpg"],
        "stock": 10,
        "price": 30,
        "sizes": ["XS", "S", "M"],
        "slug": "kids_cybertruck_long_sleeve_tee",
        "tags": ["shirt"],
        "gender": Gender.KIDS,
    },
    {
        "title": "Kids Scribble T Logo Tee",
        "description": "Short sleeve tee in organic cotton with a hand-drawn logo print.",
        "images": ["8529312-00-A_0_2000.jpg", "8529312-00-A_1.jpg"],
        "stock": 0,
        "price": 25,
        "sizes": ["XS", "S", "M"],
        "slug": "kids_scribble_t_logo_tee",
        "tags": ["shirt"],
        "gender": Gender.KIDS,
    },
    {
        "title": "Chill Pullover Hoodie",
        "description": "Classic pullover hoodie in heavyweight fleece with a kangaroo pocket.",
        "images": ["1740051-00-A_0_2000.jpg", "1740051-00-A_1.jpg"],
        "stock": 10,
        "price": 85,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "slug": "chill_pullover_hoodie",
        "tags": ["hoodie"],
        "gender": Gender.UNISEX,
    },
    {
        "title": "Embroidered Logo Beanie",
        "description": "Rib-knit beanie in a wool blend with a tonal embroidered logo.",
        "images": ["1740417-00-A_0_2000.jpg"],
        "stock": 25,
        "price": 35,
        "sizes": [],
        "slug": "embroidered_logo_beanie",
        "tags": ["hat"],
        "gender": Gender.UNISEX,
    },
]


def seed_definitions() -> list[dict[str, Any]]:
    """Return seed products as column values plus image URL lists.

    Returns:
        Fresh copies of the seed definitions, ready for bulk insert.
    """
    definitions = []
    for product in SEED_PRODUCTS:
        definition = dict(product)
        definition["slug"] = definition.get("slug") or str(Slug.from_title(definition["title"]))
        definition["gender"] = Gender(definition["gender"]).value
        definition["sizes"] = list(definition.get("sizes", []))
        definition["tags"] = list(definition.get("tags", []))
        definition["images"] = list(definition.get("images", []))
        definitions.append(definition)
    return definitions


# ============================================================================
# Seed Service
# ============================================================================


class SeedService:
    """Reloads the catalog with the seed data.

    Clears the catalog through ``CatalogService.delete_all`` and then bulk
    inserts every seed product in one write, without going through the
    per-product create path.
    """

    def __init__(self, catalog: CatalogService, logger: Any = None) -> None:
        """Initialize seed service.

        Args:
            catalog: Catalog service sharing the same session factory.
            logger: Bound structlog logger.
        """
        self.catalog = catalog
        self.logger = logger if logger is not None else structlog.get_logger(__name__)

    async def execute_seed(self) -> str:
        """Replace the catalog contents with the seed products.

        Returns:
            Confirmation message.

        Raises:
            CatalogInternalError: If clearing or inserting fails.
        """
        deleted = await self.catalog.delete_all()
        definitions = seed_definitions()

        try:
            async with transaction(self.catalog.session_factory) as repo:
                await repo.add_all(definitions)
        except StorageError as e:
            self.logger.error("Seed insert failed", error=e.detail, exc_info=e)
            raise CatalogInternalError() from e

        self.logger.info(
            "Seed executed",
            deleted=deleted,
            products_created=len(definitions),
        )
        return "Seed executed"
