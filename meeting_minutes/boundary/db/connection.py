"""
Database connection management.

Lazily constructs and memoizes the process-wide async engine bound to the
configured store endpoint and access key, plus the session factory that
entity services receive. Construction performs no I/O: the first network
round trip happens when a service opens a session.

Dependencies: sqlalchemy, meeting_minutes.configs
System role: Store connection lifecycle management
"""

import logging
from functools import lru_cache

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from meeting_minutes.configs import get_settings
from meeting_minutes.configs.database import DatabaseSettings
from meeting_minutes.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def validate_database_settings(db_config: DatabaseSettings) -> tuple[str, str]:
    """
    Check that both required connection parameters are present.

    Args:
        db_config: Database settings section

    Returns:
        tuple[str, str]: (endpoint URL, access key)

    Raises:
        ConfigurationError: If the endpoint URL or the access key is missing
    """
    if not db_config.url:
        raise ConfigurationError(db_config.url_env_var)
    if not db_config.access_key:
        raise ConfigurationError(db_config.access_key_env_var)
    return db_config.url, db_config.access_key


def build_database_url(endpoint: str, access_key: str) -> URL:
    """
    Bind the access key to the endpoint URL as the connection credential.

    Args:
        endpoint: SQLAlchemy URL of the store
        access_key: Credential for the store

    Returns:
        URL: Endpoint URL carrying the access key as its password
    """
    return make_url(endpoint).set(password=access_key)


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Return the process-wide async engine, creating it on first call.

    Settings are validated only on the first successful call; afterwards
    the cached engine is returned as-is. A failed validation is not
    cached, but get_settings() is, so a corrected environment is only
    picked up after get_settings.cache_clear().

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ConfigurationError: If the endpoint URL or the access key is missing

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database
    endpoint, access_key = validate_database_settings(db_config)
    url = build_database_url(endpoint, access_key)

    engine_kwargs = {"echo": db_config.echo_sql, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
        )

    logger.info(
        "Creating database engine",
        extra={"backend": url.get_backend_name(), "host": url.host},
    )
    return create_async_engine(url, **engine_kwargs)


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Return the process-wide async session factory bound to the engine.

    expire_on_commit=False keeps loaded attributes readable after commit.

    Returns:
        async_sessionmaker: Async session factory

    Raises:
        ConfigurationError: Propagated from get_async_engine()

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
