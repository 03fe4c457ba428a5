"""
Meeting membership service.

Manages the links between meetings and attendees, addressed by the
(meeting_id, attendee_id) pair.

Dependencies: meeting_minutes.boundary.db.CRUD, meeting_minutes.models
System role: Meeting membership use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from meeting_minutes.application.services.base_service import BaseService, coerce_id
from meeting_minutes.boundary.db.CRUD.meeting_attendee_crud import meeting_attendee_crud
from meeting_minutes.boundary.db.models.meeting_attendee_model import AttendanceStatus
from meeting_minutes.core.exceptions import RecordNotFoundError
from meeting_minutes.models.attendee import MeetingAttendee, MeetingAttendeeWithAttendee
from meeting_minutes.models.common import ApiResponse

logger = logging.getLogger(__name__)


class MeetingAttendeeService(BaseService):
    """Meeting membership service orchestrator."""

    entity_name = "Meeting attendee"

    async def add_to_meeting(
        self,
        meeting_id: UUID | str,
        attendee_id: UUID | str,
        status: AttendanceStatus | str = AttendanceStatus.INVITED,
    ) -> ApiResponse[MeetingAttendee]:
        """
        Link an attendee to a meeting.

        The store rejects unknown meeting or attendee ids and duplicate pairs.

        Args:
            meeting_id: Meeting id (UUID or its string form)
            attendee_id: Attendee id (UUID or its string form)
            status: Initial attendance status (default invited)

        Returns:
            ApiResponse[MeetingAttendee]: The new link row
        """

        async def work(session: AsyncSession) -> MeetingAttendee:
            link = await meeting_attendee_crud.create(
                session,
                meeting_id=coerce_id(meeting_id),
                attendee_id=coerce_id(attendee_id),
                attendance_status=AttendanceStatus(status).value,
            )
            logger.info(
                "Attendee added to meeting",
                extra={"meeting_id": str(meeting_id), "attendee_id": str(attendee_id)},
            )
            return MeetingAttendee.model_validate(link)

        return await self.execute(
            "add_to_meeting", work, meeting_id=meeting_id, attendee_id=attendee_id
        )

    async def remove_from_meeting(
        self,
        meeting_id: UUID | str,
        attendee_id: UUID | str,
    ) -> ApiResponse[None]:
        """Unlink an attendee from a meeting; succeeds even if no link existed."""

        async def work(session: AsyncSession) -> None:
            await meeting_attendee_crud.delete_by_pair(
                session, coerce_id(meeting_id), coerce_id(attendee_id)
            )
            return None

        return await self.execute(
            "remove_from_meeting", work, meeting_id=meeting_id, attendee_id=attendee_id
        )

    async def update_attendance_status(
        self,
        meeting_id: UUID | str,
        attendee_id: UUID | str,
        status: AttendanceStatus | str,
    ) -> ApiResponse[MeetingAttendee]:
        """
        Record an attendee's attendance for a meeting.

        Args:
            meeting_id: Meeting id (UUID or its string form)
            attendee_id: Attendee id (UUID or its string form)
            status: invited, attended or absent

        Returns:
            ApiResponse[MeetingAttendee]; failure if the pair is not linked
        """

        async def work(session: AsyncSession) -> MeetingAttendee:
            link = await meeting_attendee_crud.update_status_by_pair(
                session,
                coerce_id(meeting_id),
                coerce_id(attendee_id),
                AttendanceStatus(status).value,
            )
            if link is None:
                raise RecordNotFoundError(
                    self.entity_name, f"{attendee_id} for meeting {meeting_id}"
                )
            return MeetingAttendee.model_validate(link)

        return await self.execute(
            "update_attendance_status", work, meeting_id=meeting_id, attendee_id=attendee_id
        )

    async def get_by_meeting_id(
        self,
        meeting_id: UUID | str,
    ) -> ApiResponse[list[MeetingAttendeeWithAttendee]]:
        """
        List a meeting's links, each with its attendee nested under `attendee`.

        Unlike MeetingService.get_by_id, link fields are kept here.

        Args:
            meeting_id: Meeting id (UUID or its string form)

        Returns:
            ApiResponse[list[MeetingAttendeeWithAttendee]]
        """

        async def work(session: AsyncSession) -> list[MeetingAttendeeWithAttendee]:
            links = await meeting_attendee_crud.get_by_meeting_id(session, coerce_id(meeting_id))
            return [MeetingAttendeeWithAttendee.model_validate(link) for link in links]

        return await self.execute("get_by_meeting_id", work, meeting_id=meeting_id)
