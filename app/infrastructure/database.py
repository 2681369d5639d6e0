"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory for an engine.

    Args:
        bind: Engine the sessions will use.

    Returns:
        Configured async session factory.
    """
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# Session factory
async_session_factory = create_session_factory(engine)

# Base class for models
Base = declarative_base()


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create database tables if they don't exist.

    Args:
        bind: Engine to create the tables on.
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
