"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: meeting_minutes.application
System role: DI container for service injection
"""

from functools import lru_cache

from meeting_minutes.application.services import (
    AttendeeService,
    DataAccessServices,
    MeetingAttendeeService,
    MeetingService,
    build_services,
)


@lru_cache
def get_services() -> DataAccessServices:
    """
    Get the shared entity services.

    Services resolve the session factory on each call, so building them
    does not touch configuration.
    """
    return build_services()


def get_meeting_service() -> MeetingService:
    """Get meeting minute service."""
    return get_services().meetings


def get_attendee_service() -> AttendeeService:
    """Get attendee service."""
    return get_services().attendees


def get_meeting_attendee_service() -> MeetingAttendeeService:
    """Get meeting membership service."""
    return get_services().meeting_attendees
