"""
Meeting minute CRUD operations.

Provides Create, Read, Update, Delete operations for MeetingModel
with filtered listing, attendee eager loading and status projection.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.models
System role: Meeting minute persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from meeting_minutes.boundary.db.models.meeting_model import MeetingModel
from meeting_minutes.boundary.db.models.meeting_attendee_model import MeetingAttendeeModel
from meeting_minutes.boundary.db.CRUD.base_crud import BaseCRUD, paginate


class MeetingCRUD(BaseCRUD[MeetingModel]):
    """
    CRUD operations for MeetingModel.

    Default ordering is by scheduled time, most recent first.
    """

    def __init__(self) -> None:
        """Initialize MeetingCRUD with MeetingModel."""
        super().__init__(MeetingModel)

    def default_order_by(self) -> tuple:
        return (MeetingModel.time.desc(),)

    async def get_filtered(
        self,
        session: AsyncSession,
        status: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[MeetingModel]:
        """
        Retrieve meetings matching all supplied filters.

        Args:
            session: Async database session
            status: Exact status to match
            search: Case-insensitive substring matched against title OR content
            limit: Maximum number of meetings to return
            offset: Number of meetings to skip (pages by 10 without a limit)

        Returns:
            Sequence of MeetingModels, most recent first
        """
        stmt = select(MeetingModel).order_by(*self.default_order_by())
        if status:
            stmt = stmt.where(MeetingModel.status == status)
        if search:
            stmt = stmt.where(
                or_(
                    MeetingModel.title.icontains(search, autoescape=True),
                    MeetingModel.content.icontains(search, autoescape=True),
                )
            )
        result = await session.execute(paginate(stmt, limit, offset))
        return result.scalars().all()

    async def get_with_attendees(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> MeetingModel | None:
        """
        Retrieve a meeting with its attendee links and their attendees loaded.

        Args:
            session: Async database session
            id: Meeting UUID

        Returns:
            MeetingModel with attendee_links (and each link's attendee) loaded,
            None if not found
        """
        stmt = (
            select(MeetingModel)
            .where(MeetingModel.id == id)
            .options(
                selectinload(MeetingModel.attendee_links).selectinload(
                    MeetingAttendeeModel.attendee
                )
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_statuses(self, session: AsyncSession) -> Sequence[str]:
        """
        Fetch only the status column of every meeting.

        Args:
            session: Async database session

        Returns:
            Sequence of status strings, one per meeting row
        """
        result = await session.execute(select(MeetingModel.status))
        return result.scalars().all()

    async def ping(self, session: AsyncSession) -> None:
        """Issue the cheapest possible read against the meetings table."""
        await session.execute(select(MeetingModel.id).limit(1))


meeting_crud = MeetingCRUD()
