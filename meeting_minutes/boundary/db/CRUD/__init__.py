"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from meeting_minutes.boundary.db.CRUD import meeting_crud, attendee_crud

    # Use singleton instances
    meeting = await meeting_crud.get_by_id(db, meeting_id)

    # Or instantiate classes directly for custom behavior
    from meeting_minutes.boundary.db.CRUD import MeetingCRUD
    custom_crud = MeetingCRUD()
"""

from meeting_minutes.boundary.db.CRUD.base_crud import BaseCRUD, DEFAULT_PAGE_SIZE
from meeting_minutes.boundary.db.CRUD.meeting_crud import MeetingCRUD, meeting_crud
from meeting_minutes.boundary.db.CRUD.attendee_crud import AttendeeCRUD, attendee_crud
from meeting_minutes.boundary.db.CRUD.meeting_attendee_crud import (
    MeetingAttendeeCRUD,
    meeting_attendee_crud,
)

__all__ = [
    "BaseCRUD",
    "DEFAULT_PAGE_SIZE",
    "MeetingCRUD",
    "meeting_crud",
    "AttendeeCRUD",
    "attendee_crud",
    "MeetingAttendeeCRUD",
    "meeting_attendee_crud",
]
