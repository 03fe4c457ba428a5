"""
Exception hierarchy for the meeting minutes application.

Provides layered exception structure for configuration and store errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception definitions across the application
"""

from typing import Any


class MeetingMinutesException(Exception):
    """Base exception for all meeting minutes application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(MeetingMinutesException):
    """
    Raised when a required connection parameter is missing.

    Never converted into a result envelope: it terminates the calling
    code path before any remote call is issued.
    """

    def __init__(self, setting: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize configuration error.

        Args:
            setting: Name of the missing environment variable
            details: Additional context
        """
        details = details or {}
        details["setting"] = setting
        self.setting = setting
        super().__init__(f"Missing {setting} environment variable", details)


class StoreError(MeetingMinutesException):
    """Raised when the remote store reports a failure."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Store-provided or rewritten message
            code: Machine-readable store code (SQLSTATE) when available
            details: Additional context
        """
        details = details or {}
        if code:
            details["code"] = code
        self.code = code
        super().__init__(message, details)


class RecordNotFoundError(StoreError):
    """Raised when a single-row fetch matches no row."""

    def __init__(self, entity: str, record_id: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            entity: Human-readable entity name (e.g. "Meeting minute")
            record_id: Identifier that matched nothing
            details: Additional context
        """
        details = details or {}
        details["id"] = str(record_id)
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found", details=details)


class InvalidIdentifierError(MeetingMinutesException):
    """Raised when a caller-supplied record id is not a valid UUID."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid id: {value!r}")
