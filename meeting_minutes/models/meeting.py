"""
Meeting minute schemas.

Create/update payloads, persisted rows, the meeting detail view with
flattened attendees, and aggregate statistics.

Dependencies: pydantic
System role: Meeting minute contracts
"""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from meeting_minutes.boundary.db.models.meeting_model import MeetingStatus
from meeting_minutes.models.attendee import AttendeeWithStatus


def _require_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Title is required")
    return value


Title = Annotated[str, Field(max_length=255), AfterValidator(_require_title)]


class MeetingMinuteCreate(BaseModel):
    """
    Payload for creating a meeting minute.

    Identity and timestamps are assigned by the store. The scheduled time
    is accepted as either `time` or `meeting_date`.
    """

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    title: Title = Field(..., description="Meeting title")
    time: datetime = Field(
        ...,
        validation_alias=AliasChoices("time", "meeting_date"),
        description="Scheduled meeting time",
    )
    content: str = Field(default="", description="Markdown content")
    status: MeetingStatus = Field(default=MeetingStatus.DRAFT, validate_default=True)
    location: str | None = Field(None, max_length=255)
    tags: list[str] | None = None
    created_by: str | None = Field(None, max_length=255)


class MeetingMinuteUpdate(BaseModel):
    """Partial update payload; only fields explicitly set are written."""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    title: Title | None = None
    time: datetime | None = Field(
        None,
        validation_alias=AliasChoices("time", "meeting_date"),
    )
    content: str | None = None
    status: MeetingStatus | None = None
    location: str | None = Field(None, max_length=255)
    tags: list[str] | None = None

    @field_validator("title", "time", "content", "status")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        # Omitted means unchanged; null would violate NOT NULL
        if value is None:
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value


class MeetingMinute(BaseModel):
    """
    Persisted meeting minute.

    status is a plain string so rows with unrecognized values still load.
    """

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    time: datetime
    content: str
    status: str
    location: str | None = None
    tags: list[str] | None = None
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class MeetingMinuteDetail(MeetingMinute):
    """Meeting minute with its attendees flattened in; never None."""

    attendees: list[AttendeeWithStatus] = Field(default_factory=list)


class MeetingStats(BaseModel):
    """
    Status counters over all meeting rows.

    total counts every row; rows with an unrecognized status count only
    toward total.
    """

    total: int = 0
    draft: int = 0
    published: int = 0
    archived: int = 0
