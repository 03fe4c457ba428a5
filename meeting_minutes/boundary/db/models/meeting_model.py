"""
Meeting minute ORM model.

Represents one recorded meeting: title, scheduled time, markdown content
and a lifecycle status, optionally linked to attendees.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.base
System role: Meeting minute persistence
"""

import enum
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meeting_minutes.boundary.db.base import Base, UUIDMixin, TimestampMixin


class MeetingStatus(str, enum.Enum):
    """
    Meeting minute lifecycle states.

    Transitions are unconstrained; any status may follow any other.

    DRAFT: Being written, not shared yet
    PUBLISHED: Shared with attendees
    ARCHIVED: Retained for reference only
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class MeetingModel(Base, UUIDMixin, TimestampMixin):
    """
    Meeting minute ORM model.

    status is stored as a plain string rather than a database enum so rows
    written by other clients with an unrecognized status remain readable.
    Deleting a meeting cascades to its attendee links.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Meeting title
        time: Scheduled meeting time (column meeting_time)
        content: Markdown body, may be empty
        status: Lifecycle status (draft/published/archived)
        location: Optional meeting location
        tags: Optional list of tag strings
        created_by: Optional creator reference
        attendee_links: MeetingAttendeeModel rows for this meeting
        created_at: Row creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "meeting_minutes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    time: Mapped[datetime] = mapped_column(
        "meeting_time",
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=MeetingStatus.DRAFT.value,
        index=True,
    )

    location: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True, default=None)

    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    # Relationships
    attendee_links = relationship(
        "MeetingAttendeeModel",
        back_populates="meeting",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
