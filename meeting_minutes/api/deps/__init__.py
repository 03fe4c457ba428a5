"""API-specific dependencies."""

from .dependencies import (
    get_attendee_service,
    get_meeting_attendee_service,
    get_meeting_service,
    get_services,
)

__all__ = [
    "get_attendee_service",
    "get_meeting_attendee_service",
    "get_meeting_service",
    "get_services",
]
