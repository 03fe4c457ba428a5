"""
Attendee and meeting membership schemas.

Dependencies: pydantic
System role: Attendee and attendance link contracts
"""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from meeting_minutes.boundary.db.models.meeting_attendee_model import AttendanceStatus


def _require_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name is required")
    return value


Name = Annotated[str, Field(max_length=255), AfterValidator(_require_name)]
Email = Annotated[str, Field(max_length=320)]


class AttendeeCreate(BaseModel):
    """Payload for creating an attendee."""

    name: Name = Field(..., description="Display name")
    email: Email = Field(..., description="Contact email")
    role: str | None = Field(None, max_length=255)
    department: str | None = Field(None, max_length=255)


class AttendeeUpdate(BaseModel):
    """Partial update payload for an attendee; unset fields are left unchanged."""

    name: Name | None = None
    email: Email | None = None
    role: str | None = Field(None, max_length=255)
    department: str | None = Field(None, max_length=255)

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None:
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value


class Attendee(BaseModel):
    """Persisted attendee."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    role: str | None = None
    department: str | None = None
    created_at: datetime
    updated_at: datetime


class AttendeeWithStatus(Attendee):
    """Attendee fields merged with the attendance status of one meeting."""

    attendance_status: str


class MeetingAttendee(BaseModel):
    """Persisted meeting-attendee link."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    meeting_id: uuid.UUID
    attendee_id: uuid.UUID
    attendance_status: str
    created_at: datetime


class MeetingAttendeeWithAttendee(MeetingAttendee):
    """Link fields plus the nested attendee row."""

    attendee: Attendee | None = None


class AddAttendeeRequest(BaseModel):
    """Payload for linking an attendee to a meeting."""

    attendee_id: uuid.UUID
    attendance_status: AttendanceStatus = AttendanceStatus.INVITED


class AttendanceUpdate(BaseModel):
    """Payload for changing an attendance status."""

    attendance_status: AttendanceStatus
