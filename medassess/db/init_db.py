"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from medassess.db.base import Base
from medassess.fixtures.library import seed_library
from medassess.store.sql import SqlRecordService

# Register tables on Base.metadata
import medassess.models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create all database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables (use with caution)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")


async def init_db(engine: AsyncEngine, session: AsyncSession, seed: bool = True) -> None:
    """Create tables and seed the protocol/reference library.

    Args:
        engine: Engine to create tables on
        session: Session used for seeding
        seed: Whether to seed empty library tables
    """
    await create_tables(engine)

    if seed:
        created = await seed_library(SqlRecordService(session))
        logger.info(f"Library seed complete: {created}")

    logger.info("Database initialization complete")
