"""
Meeting-attendee link CRUD operations.

Link rows are addressed by the (meeting_id, attendee_id) pair rather
than by their own primary key.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.models
System role: Meeting membership persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from meeting_minutes.boundary.db.models.meeting_attendee_model import MeetingAttendeeModel
from meeting_minutes.boundary.db.CRUD.base_crud import BaseCRUD


class MeetingAttendeeCRUD(BaseCRUD[MeetingAttendeeModel]):
    """CRUD operations for MeetingAttendeeModel keyed by meeting and attendee."""

    def __init__(self) -> None:
        """Initialize MeetingAttendeeCRUD with MeetingAttendeeModel."""
        super().__init__(MeetingAttendeeModel)

    @staticmethod
    def _pair_clause(meeting_id: UUID, attendee_id: UUID):
        return (
            MeetingAttendeeModel.meeting_id == meeting_id,
            MeetingAttendeeModel.attendee_id == attendee_id,
        )

    async def delete_by_pair(
        self,
        session: AsyncSession,
        meeting_id: UUID,
        attendee_id: UUID,
    ) -> bool:
        """
        Delete the link between a meeting and an attendee.

        Args:
            session: Async database session
            meeting_id: Meeting UUID
            attendee_id: Attendee UUID

        Returns:
            True if a link was deleted, False if none existed
        """
        stmt = delete(MeetingAttendeeModel).where(*self._pair_clause(meeting_id, attendee_id))
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def update_status_by_pair(
        self,
        session: AsyncSession,
        meeting_id: UUID,
        attendee_id: UUID,
        attendance_status: str,
    ) -> MeetingAttendeeModel | None:
        """
        Set the attendance status of an existing link.

        Args:
            session: Async database session
            meeting_id: Meeting UUID
            attendee_id: Attendee UUID
            attendance_status: New status value

        Returns:
            Updated link, None if no link exists for the pair
        """
        stmt = (
            update(MeetingAttendeeModel)
            .where(*self._pair_clause(meeting_id, attendee_id))
            .values(attendance_status=attendance_status)
            .returning(MeetingAttendeeModel)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_meeting_id(
        self,
        session: AsyncSession,
        meeting_id: UUID,
    ) -> Sequence[MeetingAttendeeModel]:
        """
        Retrieve all links of a meeting with their attendee loaded.

        Args:
            session: Async database session
            meeting_id: Meeting UUID

        Returns:
            Sequence of MeetingAttendeeModels with attendee loaded
        """
        stmt = (
            select(MeetingAttendeeModel)
            .where(MeetingAttendeeModel.meeting_id == meeting_id)
            .options(selectinload(MeetingAttendeeModel.attendee))
            .order_by(MeetingAttendeeModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


meeting_attendee_crud = MeetingAttendeeCRUD()
