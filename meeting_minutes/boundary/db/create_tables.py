"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.
This is the setup script referenced by the "table not found" error message.

Dependencies: sqlalchemy, meeting_minutes.configs
System role: Database schema initialization

Usage:
    python -m meeting_minutes.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from meeting_minutes.boundary.db.base import Base
from meeting_minutes.boundary.db.connection import get_async_engine
from meeting_minutes.configs import get_settings
from meeting_minutes.core.exceptions import MeetingMinutesException
from meeting_minutes.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from meeting_minutes.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged, so it is safe
    to run multiple times.

    Args:
        engine: Engine to use; defaults to the process-wide engine

    Raises:
        ConfigurationError: If connection settings are missing
        SQLAlchemyError: If the store rejects the DDL
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use; defaults to the process-wide engine

    Raises:
        MeetingMinutesException: If the environment is not development
    """
    settings = get_settings()
    if not settings.is_development:
        raise MeetingMinutesException(
            "Refusing to drop tables outside development",
            details={"environment": settings.environment},
        )

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(create_all_tables())
