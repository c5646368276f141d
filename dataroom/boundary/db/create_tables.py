"""
Database table creation.

Creates all tables registered on Base.metadata.

Dependencies: sqlalchemy, dataroom.configs
System role: Database schema initialization

Usage:
    python -m dataroom.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from dataroom.boundary.db.base import Base
from dataroom.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from dataroom.boundary.db.models.analysis_record_model import AnalysisRecordModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables. Idempotent; existing tables stay unchanged.

    Args:
        engine: Target engine (created from settings if None)

    Raises:
        SQLAlchemyError: Connection or DDL failure
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s:create_all_tables - Tables created", __name__)


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """Drop all tables and their data. Development only."""
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("%s:drop_all_tables - All tables dropped", __name__)


if __name__ == "__main__":
    asyncio.run(create_all_tables())
