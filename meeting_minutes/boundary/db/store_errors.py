"""
Store error classification.

Maps failures raised by the remote store into a small closed set of
categories and the user-facing message each category produces. The
machine-readable SQLSTATE code is preferred; message substring matching
is kept as a fallback for drivers that do not expose codes (SQLite).

Dependencies: sqlalchemy
System role: Normalization of store failures into envelope messages
"""

import enum
import re

from sqlalchemy.exc import DBAPIError, NoResultFound, StatementError

from meeting_minutes.core.exceptions import RecordNotFoundError, StoreError

UNDEFINED_TABLE = "42P01"
INSUFFICIENT_PRIVILEGE = "42501"

MISSING_RELATION_MESSAGE = (
    "Database table not found. Please run the database setup script "
    "(python -m meeting_minutes.boundary.db.create_tables)."
)
PERMISSION_DENIED_MESSAGE = (
    "Permission denied. Please check the access policy for this table."
)
NOT_FOUND_MESSAGE = "Record not found"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

_MISSING_RELATION_PATTERNS = (
    re.compile(r"relation .* does not exist", re.IGNORECASE),
    re.compile(r"no such table", re.IGNORECASE),
)
_PERMISSION_PATTERNS = (
    re.compile(r"permission denied", re.IGNORECASE),
    re.compile(r"row-level security", re.IGNORECASE),
)


class StoreErrorKind(str, enum.Enum):
    """
    Locally recognized store failure categories.

    MISSING_RELATION: Table or view is absent (schema not set up)
    PERMISSION_DENIED: Credential lacks privileges or a policy rejected the row
    NOT_FOUND: A single-row fetch matched nothing
    OTHER: Anything else; the store's own message is passed through
    """

    MISSING_RELATION = "missing_relation"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    OTHER = "other"


def extract_store_code(exc: BaseException) -> str | None:
    """
    Read the SQLSTATE code from a store exception, if the driver supplies one.

    Args:
        exc: Exception raised by SQLAlchemy or the driver

    Returns:
        str | None: Five-character SQLSTATE code, or None
    """
    if isinstance(exc, StoreError):
        return exc.code

    candidates = [exc]
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        candidates.append(exc.orig)
        if exc.orig.__cause__ is not None:
            candidates.append(exc.orig.__cause__)

    for candidate in candidates:
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str) and code:
                return code
    return None


def extract_store_message(exc: BaseException) -> str | None:
    """
    Read the driver's own message, without SQLAlchemy's statement echo.

    Args:
        exc: Exception raised by SQLAlchemy or the driver

    Returns:
        str | None: Message text, or None if empty
    """
    if isinstance(exc, StoreError):
        return exc.message or None
    if isinstance(exc, StatementError):
        # str(StatementError) echoes the SQL and its parameters
        message = str(exc.orig).strip() if exc.orig is not None else ""
    else:
        message = str(exc).strip()
    return message or None


def classify_store_error(exc: BaseException) -> StoreErrorKind:
    """
    Classify a store failure, structurally first and by message second.

    Args:
        exc: Exception raised while talking to the store

    Returns:
        StoreErrorKind: Recognized category
    """
    if isinstance(exc, (RecordNotFoundError, NoResultFound)):
        return StoreErrorKind.NOT_FOUND

    code = extract_store_code(exc)
    if code == UNDEFINED_TABLE:
        return StoreErrorKind.MISSING_RELATION
    if code == INSUFFICIENT_PRIVILEGE:
        return StoreErrorKind.PERMISSION_DENIED
    if code:
        return StoreErrorKind.OTHER

    # Fallback for drivers without SQLSTATE codes
    message = extract_store_message(exc) or ""
    if any(p.search(message) for p in _MISSING_RELATION_PATTERNS):
        return StoreErrorKind.MISSING_RELATION
    if any(p.search(message) for p in _PERMISSION_PATTERNS):
        return StoreErrorKind.PERMISSION_DENIED
    return StoreErrorKind.OTHER


def describe_store_error(exc: BaseException) -> str:
    """
    Produce the user-facing message for a store failure.

    Args:
        exc: Exception raised while talking to the store

    Returns:
        str: Message suitable for the envelope's error field
    """
    kind = classify_store_error(exc)
    if kind is StoreErrorKind.MISSING_RELATION:
        return MISSING_RELATION_MESSAGE
    if kind is StoreErrorKind.PERMISSION_DENIED:
        return PERMISSION_DENIED_MESSAGE

    message = extract_store_message(exc)
    if kind is StoreErrorKind.NOT_FOUND and not isinstance(exc, RecordNotFoundError):
        message = NOT_FOUND_MESSAGE
    if message:
        return message

    code = extract_store_code(exc)
    if code:
        return f"Database error (code {code})"
    return UNKNOWN_ERROR_MESSAGE


def is_store_error(exc: BaseException) -> bool:
    """
    True if the exception originated from the store rather than local code.

    Only driver errors (wrapped by SQLAlchemy as DBAPIError) count. A plain
    StatementError means a parameter failed to bind before anything was
    sent, which is a local failure.
    """
    return isinstance(exc, (StoreError, DBAPIError, NoResultFound))
