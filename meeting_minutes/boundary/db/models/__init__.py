"""
Database models package.

Exports:
  - MeetingModel, MeetingStatus: Meeting minute ORM model and status enum
  - AttendeeModel: Attendee ORM model
  - MeetingAttendeeModel, AttendanceStatus: Link ORM model and status enum

Dependencies: sqlalchemy, meeting_minutes.boundary.db.base
System role: Database model definitions for domain entities
"""

from meeting_minutes.boundary.db.models.meeting_model import MeetingModel, MeetingStatus
from meeting_minutes.boundary.db.models.attendee_model import AttendeeModel
from meeting_minutes.boundary.db.models.meeting_attendee_model import (
    AttendanceStatus,
    MeetingAttendeeModel,
)

__all__ = [
    "MeetingModel",
    "MeetingStatus",
    "AttendeeModel",
    "MeetingAttendeeModel",
    "AttendanceStatus",
]
