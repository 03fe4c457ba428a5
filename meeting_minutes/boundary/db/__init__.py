"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Memoized connection accessors
  - MeetingModel, AttendeeModel, MeetingAttendeeModel: Domain entities
  - MeetingStatus, AttendanceStatus: Enum types for status values
  - meeting_crud, attendee_crud, meeting_attendee_crud: CRUD operation singletons

Dependencies: sqlalchemy, meeting_minutes.configs
System role: Database adapter providing persistent storage for meeting
minutes, attendees and attendance links.
"""

from meeting_minutes.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from meeting_minutes.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from meeting_minutes.boundary.db.models import (
    AttendanceStatus,
    AttendeeModel,
    MeetingAttendeeModel,
    MeetingModel,
    MeetingStatus,
)
from meeting_minutes.boundary.db.CRUD import (
    BaseCRUD,
    MeetingCRUD,
    AttendeeCRUD,
    MeetingAttendeeCRUD,
    meeting_crud,
    attendee_crud,
    meeting_attendee_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "MeetingModel",
    "MeetingStatus",
    "AttendeeModel",
    "MeetingAttendeeModel",
    "AttendanceStatus",
    # CRUD classes
    "BaseCRUD",
    "MeetingCRUD",
    "AttendeeCRUD",
    "MeetingAttendeeCRUD",
    # CRUD singletons
    "meeting_crud",
    "attendee_crud",
    "meeting_attendee_crud",
]
