#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables if needed and replaces their contents with
the built-in seed products.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --database-url sqlite+aiosqlite:///./catalog.db
    python scripts/seed_catalog.py --no-create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import structlog
from sqlalchemy.ext.asyncio import create_async_engine

from app.catalog.seed import SEED_PRODUCTS, SeedService
from app.catalog.service import CatalogService
from app.infrastructure.config import settings
from app.infrastructure.database import create_session_factory, create_tables
from app.infrastructure.logging import configure_logging


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Reload the product catalog with seed data",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--no-create-tables",
        action="store_true",
        help="Don't create missing tables before seeding",
    )

    args = parser.parse_args()

    configure_logging(json_output=False)
    logger = structlog.get_logger("seed_catalog")

    engine = create_async_engine(args.database_url)
    try:
        if not args.no_create_tables:
            logger.info("Creating database tables")
            await create_tables(engine)

        catalog = CatalogService(create_session_factory(engine), logger=logger)
        message = await SeedService(catalog, logger=logger).execute_seed()
        logger.info(message, products=len(SEED_PRODUCTS))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
