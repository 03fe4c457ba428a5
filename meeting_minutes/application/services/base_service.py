"""
Shared unit-of-work and envelope conversion for entity services.

Every public service operation runs its store work through
BaseService.execute(), which opens a session, commits on success and
converts every failure into an ApiResponse. Only ConfigurationError
escapes, raised before any session is opened.

Dependencies: sqlalchemy, pydantic, meeting_minutes.boundary.db
System role: Data access boundary error policy
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar
from uuid import UUID

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from meeting_minutes.boundary.db.connection import get_async_session_factory
from meeting_minutes.boundary.db.store_errors import describe_store_error, is_store_error
from meeting_minutes.core.exceptions import ConfigurationError, InvalidIdentifierError
from meeting_minutes.models.common import ApiResponse
from meeting_minutes.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")
PayloadT = TypeVar("PayloadT", bound=BaseModel)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def describe_validation_error(exc: ValidationError) -> str:
    """
    Summarize a pydantic ValidationError as one readable line.

    Args:
        exc: Validation error raised while parsing a payload

    Returns:
        str: e.g. "Invalid payload: title: Value error, Title is required"
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "Invalid payload: " + "; ".join(parts)


def coerce_payload(payload: PayloadT | dict[str, Any], schema: type[PayloadT]) -> PayloadT:
    """Accept either a schema instance or a plain mapping for it."""
    if isinstance(payload, schema):
        return payload
    return schema.model_validate(payload)


def coerce_id(value: UUID | str) -> UUID:
    """
    Accept a record id as a UUID or its string form (as found in JSON).

    Raises:
        InvalidIdentifierError: If the value does not parse as a UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise InvalidIdentifierError(value) from e


class BaseService:
    """
    Base class for entity services.

    Holds an injected session factory. When none is injected, the
    process-wide factory is resolved at call time so that missing
    configuration surfaces as ConfigurationError on first use.

    Attributes:
        entity_name: Human-readable entity name used in messages and logs
    """

    entity_name = "Record"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        """
        Initialize service with an optional session factory.

        Args:
            session_factory: Async session factory; defaults to the
                process-wide factory from the connection accessor
        """
        self._session_factory = session_factory

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """
        Resolve the session factory.

        Raises:
            ConfigurationError: If connection settings are missing
        """
        if self._session_factory is None:
            return get_async_session_factory()
        return self._session_factory

    async def execute(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        **context: Any,
    ) -> ApiResponse[T]:
        """
        Run one unit of store work and wrap the outcome in an envelope.

        Args:
            operation: Operation name for logging (e.g. "create")
            work: Coroutine function receiving an open session
            **context: Extra log context (ids, filters)

        Returns:
            ApiResponse: success with the work's return value, or failure
            with a human-readable message

        Raises:
            ConfigurationError: If connection settings are missing
        """
        session_factory = self.session_factory

        try:
            async with session_factory() as session:
                data = await work(session)
                await session.commit()
            return ApiResponse.ok(data)
        except ConfigurationError:
            raise
        except InvalidIdentifierError as e:
            logger.warning(
                "Invalid record id",
                extra={"entity": self.entity_name, "operation": operation, "error": e.message},
            )
            return ApiResponse.fail(e.message)
        except ValidationError as e:
            message = describe_validation_error(e)
            logger.warning(
                "Invalid payload",
                extra={"entity": self.entity_name, "operation": operation, "error": message},
            )
            return ApiResponse.fail(message)
        except Exception as e:
            if is_store_error(e):
                message = describe_store_error(e)
                logger.error(
                    "Store operation failed",
                    extra={
                        "entity": self.entity_name,
                        "operation": operation,
                        "error": message,
                        **{key: str(val) for key, val in context.items()},
                    },
                )
                return ApiResponse.fail(message)

            log_exception_with_context(
                logger,
                "Unexpected failure in data access operation",
                e,
                entity=self.entity_name,
                operation=operation,
                **context,
            )
            return ApiResponse.fail(UNEXPECTED_ERROR_MESSAGE)
