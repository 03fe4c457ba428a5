"""
Meeting-attendee link ORM model.

Join table associating one meeting with one attendee and carrying the
attendee's attendance status for that meeting.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.base
System role: Meeting membership persistence
"""

import enum
from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meeting_minutes.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class AttendanceStatus(str, enum.Enum):
    """
    Per-meeting attendance states.

    INVITED: Added to the meeting, attendance not recorded yet
    ATTENDED: Was present
    ABSENT: Was not present
    """

    INVITED = "invited"
    ATTENDED = "attended"
    ABSENT = "absent"


class MeetingAttendeeModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Meeting-attendee link ORM model.

    (meeting_id, attendee_id) is unique; both foreign keys cascade on delete.

    Attributes:
        id: UUID primary key (auto-generated)
        meeting_id: Referenced meeting
        attendee_id: Referenced attendee
        attendance_status: invited/attended/absent
        meeting: Parent MeetingModel
        attendee: Linked AttendeeModel
        created_at: Row creation timestamp
    """

    __tablename__ = "meeting_attendees"
    __table_args__ = (
        UniqueConstraint("meeting_id", "attendee_id", name="uq_meeting_attendee"),
    )

    meeting_id: Mapped[UUID] = mapped_column(
        ForeignKey("meeting_minutes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attendee_id: Mapped[UUID] = mapped_column(
        ForeignKey("attendees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attendance_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=AttendanceStatus.INVITED.value,
    )

    # Relationships
    meeting = relationship("MeetingModel", back_populates="attendee_links")
    attendee = relationship("AttendeeModel", back_populates="meeting_links")
