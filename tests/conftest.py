"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite async database, session factory, entity
services bound to it, and cache resets for settings and connection.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from meeting_minutes.application.services import build_services
from meeting_minutes.boundary.db.base import Base
from meeting_minutes.boundary.db.connection import get_async_engine, get_async_session_factory
from meeting_minutes.configs import get_settings

# Register all models with Base.metadata
from meeting_minutes.boundary.db import models  # noqa: F401


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _make_memory_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine whose single connection holds the schema
    """
    engine = _make_memory_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def empty_engine():
    """In-memory SQLite async engine with no tables created."""
    engine = _make_memory_engine()
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory test engine."""
    return async_sessionmaker(test_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def services(session_factory):
    """All entity services bound to the test session factory."""
    return build_services(session_factory)


@pytest.fixture
def meeting_service(services):
    """MeetingService bound to the test database."""
    return services.meetings


@pytest.fixture
def attendee_service(services):
    """AttendeeService bound to the test database."""
    return services.attendees


@pytest.fixture
def membership_service(services):
    """MeetingAttendeeService bound to the test database."""
    return services.meeting_attendees


@pytest.fixture
def reset_connection_caches():
    """Clear memoized settings, engine and session factory around a test."""
    get_settings.cache_clear()
    get_async_engine.cache_clear()
    get_async_session_factory.cache_clear()
    yield
    get_settings.cache_clear()
    get_async_engine.cache_clear()
    get_async_session_factory.cache_clear()


@pytest.fixture
def meeting_payload() -> dict:
    """Minimal valid meeting creation payload."""
    return {
        "title": "Q1 Planning",
        "time": "2025-01-10T09:00:00Z",
        "content": "# Agenda",
    }


@pytest.fixture
def meeting_time() -> datetime:
    """A fixed meeting time."""
    return datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def meeting_id() -> uuid.UUID:
    """Generate a test meeting ID."""
    return uuid.uuid4()


@pytest.fixture
def attendee_id() -> uuid.UUID:
    """Generate a test attendee ID."""
    return uuid.uuid4()
