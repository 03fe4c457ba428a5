"""
Attendee ORM model.

Represents a person who can be invited to meetings.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.base
System role: Attendee persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meeting_minutes.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AttendeeModel(Base, UUIDMixin, TimestampMixin):
    """
    Attendee ORM model.

    Email is indexed for search but not unique; uniqueness is left to
    the organization's own data hygiene.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Contact email
        role: Optional job role
        department: Optional department
        meeting_links: MeetingAttendeeModel rows for this attendee
        created_at: Row creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "attendees"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    role: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    # Relationships
    meeting_links = relationship(
        "MeetingAttendeeModel",
        back_populates="attendee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
