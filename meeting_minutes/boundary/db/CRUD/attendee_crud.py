"""
Attendee CRUD operations.

Provides Create, Read, Update, Delete operations for AttendeeModel
with name/email search.

Dependencies: sqlalchemy, meeting_minutes.boundary.db.models
System role: Attendee persistence operations
"""

from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from meeting_minutes.boundary.db.models.attendee_model import AttendeeModel
from meeting_minutes.boundary.db.CRUD.base_crud import BaseCRUD, paginate


class AttendeeCRUD(BaseCRUD[AttendeeModel]):
    """
    CRUD operations for AttendeeModel.

    Default ordering is alphabetical by name.
    """

    def __init__(self) -> None:
        """Initialize AttendeeCRUD with AttendeeModel."""
        super().__init__(AttendeeModel)

    def default_order_by(self) -> tuple:
        return (AttendeeModel.name.asc(),)

    async def get_filtered(
        self,
        session: AsyncSession,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[AttendeeModel]:
        """
        Retrieve attendees, optionally matching a search term.

        Args:
            session: Async database session
            search: Case-insensitive substring matched against name OR email
            limit: Maximum number of attendees to return
            offset: Number of attendees to skip (pages by 10 without a limit)

        Returns:
            Sequence of AttendeeModels ordered by name
        """
        stmt = select(AttendeeModel).order_by(*self.default_order_by())
        if search:
            stmt = stmt.where(
                or_(
                    AttendeeModel.name.icontains(search, autoescape=True),
                    AttendeeModel.email.icontains(search, autoescape=True),
                )
            )
        result = await session.execute(paginate(stmt, limit, offset))
        return result.scalars().all()


attendee_crud = AttendeeCRUD()
