"""
Store liveness probe.

Dependencies: meeting_minutes.boundary.db
System role: Health check for external collaborators
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from meeting_minutes.boundary.db.connection import get_async_session_factory
from meeting_minutes.boundary.db.CRUD.meeting_crud import meeting_crud

logger = logging.getLogger(__name__)


async def check_store_health(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> bool:
    """
    Read one id from the meetings table.

    Args:
        session_factory: Session factory; defaults to the process-wide one

    Returns:
        bool: True iff the read completed without a store error

    Raises:
        ConfigurationError: If connection settings are missing
    """
    session_factory = session_factory or get_async_session_factory()
    try:
        async with session_factory() as session:
            await meeting_crud.ping(session)
        return True
    except Exception as e:
        logger.error("Health check failed", extra={"error": str(e)})
        return False
