"""
Entity services.

Each service shares one injected session factory. build_services() wires
all of them to the same factory, mirroring how collaborators consume the
data access layer as one unit.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .attendee_service import AttendeeService
from .base_service import BaseService
from .health_service import check_store_health
from .meeting_attendee_service import MeetingAttendeeService
from .meeting_service import MeetingService


@dataclass(frozen=True)
class DataAccessServices:
    """All entity services bound to one session factory."""

    meetings: MeetingService
    attendees: AttendeeService
    meeting_attendees: MeetingAttendeeService


def build_services(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> DataAccessServices:
    """
    Create every entity service around the same session factory.

    Args:
        session_factory: Injected factory; None defers to the process-wide one

    Returns:
        DataAccessServices
    """
    return DataAccessServices(
        meetings=MeetingService(session_factory),
        attendees=AttendeeService(session_factory),
        meeting_attendees=MeetingAttendeeService(session_factory),
    )


__all__ = [
    "AttendeeService",
    "BaseService",
    "DataAccessServices",
    "MeetingAttendeeService",
    "MeetingService",
    "build_services",
    "check_store_health",
]
