"""
Attendee service.

Coordinates attendee operations: alphabetical listing with name/email
search, create/update/delete. Every operation returns an ApiResponse.

Dependencies: meeting_minutes.boundary.db.CRUD, meeting_minutes.models
System role: Attendee use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from meeting_minutes.application.services.base_service import BaseService, coerce_id, coerce_payload
from meeting_minutes.boundary.db.CRUD.attendee_crud import attendee_crud
from meeting_minutes.core.exceptions import RecordNotFoundError
from meeting_minutes.models.attendee import Attendee, AttendeeCreate, AttendeeUpdate
from meeting_minutes.models.common import ApiResponse

logger = logging.getLogger(__name__)


class AttendeeService(BaseService):
    """Attendee service orchestrator."""

    entity_name = "Attendee"

    async def get_all(
        self,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ApiResponse[list[Attendee]]:
        """
        List attendees ordered by name.

        Args:
            search: Case-insensitive substring matched against name or email
            limit: Maximum number of attendees
            offset: Number of attendees to skip (page size 10 without a limit)

        Returns:
            ApiResponse[list[Attendee]]
        """

        async def work(session: AsyncSession) -> list[Attendee]:
            attendees = await attendee_crud.get_filtered(
                session, search=search, limit=limit, offset=offset
            )
            return [Attendee.model_validate(a) for a in attendees]

        return await self.execute("get_all", work, search=search, limit=limit, offset=offset)

    async def search(self, query: str) -> ApiResponse[list[Attendee]]:
        """Attendees whose name or email contains query, ordered by name."""
        return await self.get_all(search=query)

    async def get_by_id(self, attendee_id: UUID | str) -> ApiResponse[Attendee]:
        """
        Get an attendee.

        Args:
            attendee_id: Attendee id (UUID or its string form)

        Returns:
            ApiResponse[Attendee]; failure if no attendee matches
        """

        async def work(session: AsyncSession) -> Attendee:
            record_id = coerce_id(attendee_id)
            attendee = await attendee_crud.get_by_id(session, record_id)
            if attendee is None:
                raise RecordNotFoundError(self.entity_name, record_id)
            return Attendee.model_validate(attendee)

        return await self.execute("get_by_id", work, attendee_id=attendee_id)

    async def create(self, payload: AttendeeCreate | dict[str, Any]) -> ApiResponse[Attendee]:
        """
        Create an attendee.

        Args:
            payload: Attendee fields (no id or timestamps)

        Returns:
            ApiResponse[Attendee]: The persisted row
        """

        async def work(session: AsyncSession) -> Attendee:
            data = coerce_payload(payload, AttendeeCreate)
            attendee = await attendee_crud.create(session, **data.model_dump())
            logger.info("Attendee created", extra={"attendee_id": str(attendee.id)})
            return Attendee.model_validate(attendee)

        return await self.execute("create", work)

    async def update(
        self,
        attendee_id: UUID | str,
        payload: AttendeeUpdate | dict[str, Any],
    ) -> ApiResponse[Attendee]:
        """
        Change only the supplied fields of an attendee.

        Args:
            attendee_id: Attendee id (UUID or its string form)
            payload: Fields to change

        Returns:
            ApiResponse[Attendee]: The full row after the update
        """

        async def work(session: AsyncSession) -> Attendee:
            record_id = coerce_id(attendee_id)
            updates = coerce_payload(payload, AttendeeUpdate).model_dump(exclude_unset=True)
            attendee = await attendee_crud.update_by_id(session, record_id, **updates)
            if attendee is None:
                raise RecordNotFoundError(self.entity_name, record_id)
            return Attendee.model_validate(attendee)

        return await self.execute("update", work, attendee_id=attendee_id)

    async def delete(self, attendee_id: UUID | str) -> ApiResponse[None]:
        """Delete an attendee and its meeting links; absent attendees also succeed."""

        async def work(session: AsyncSession) -> None:
            await attendee_crud.delete_by_id(session, coerce_id(attendee_id))
            return None

        return await self.execute("delete", work, attendee_id=attendee_id)
