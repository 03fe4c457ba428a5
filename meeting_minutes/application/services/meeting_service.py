"""
Meeting minute service.

Coordinates meeting minute operations: filtered listing, detail fetch
with flattened attendees, create/update/delete, duplication and status
statistics. Every operation returns an ApiResponse.

Dependencies: meeting_minutes.boundary.db.CRUD, meeting_minutes.models
System role: Meeting minute use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from meeting_minutes.application.services.base_service import BaseService, coerce_id, coerce_payload
from meeting_minutes.boundary.db.CRUD.meeting_crud import meeting_crud
from meeting_minutes.boundary.db.models.meeting_model import MeetingModel, MeetingStatus
from meeting_minutes.core.exceptions import RecordNotFoundError
from meeting_minutes.models.attendee import AttendeeWithStatus
from meeting_minutes.models.common import ApiResponse
from meeting_minutes.models.meeting import (
    MeetingMinute,
    MeetingMinuteCreate,
    MeetingMinuteDetail,
    MeetingMinuteUpdate,
    MeetingStats,
)

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"

# Columns the store assigns; stripped from a row before re-inserting it.
_STORE_ASSIGNED = ("id", "created_at", "updated_at")


def flatten_meeting_detail(meeting: MeetingModel) -> MeetingMinuteDetail:
    """
    Merge each attendee link into its attendee row.

    Every link contributes the linked attendee's fields plus the link's
    attendance_status; the link rows themselves are not exposed.

    Args:
        meeting: MeetingModel with attendee_links and their attendee loaded

    Returns:
        MeetingMinuteDetail: Meeting fields plus attendees (empty list if none)
    """
    attendees = [
        AttendeeWithStatus.model_validate(
            {
                **_column_values(link.attendee),
                "attendance_status": link.attendance_status,
            }
        )
        for link in (meeting.attendee_links or [])
        if link.attendee is not None
    ]
    return MeetingMinuteDetail.model_validate(
        {**_column_values(meeting), "attendees": attendees}
    )


def _column_values(instance: Any) -> dict[str, Any]:
    """Map of mapped attribute name to value for an ORM instance."""
    mapper = instance.__mapper__
    return {attr.key: getattr(instance, attr.key) for attr in mapper.column_attrs}


def count_statuses(statuses: list[str]) -> MeetingStats:
    """
    Count meetings per known status.

    Unrecognized values count toward total only.

    Args:
        statuses: One status value per meeting row

    Returns:
        MeetingStats: total, draft, published, archived
    """
    stats = MeetingStats(total=len(statuses))
    for status in statuses:
        if status == MeetingStatus.DRAFT.value:
            stats.draft += 1
        elif status == MeetingStatus.PUBLISHED.value:
            stats.published += 1
        elif status == MeetingStatus.ARCHIVED.value:
            stats.archived += 1
    return stats


class MeetingService(BaseService):
    """Meeting minute service orchestrator."""

    entity_name = "Meeting minute"

    async def get_all(
        self,
        status: MeetingStatus | str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ApiResponse[list[MeetingMinute]]:
        """
        List meeting minutes, most recent meeting time first.

        Filters combine with AND; search matches title OR content,
        case-insensitively.

        Args:
            status: Only meetings with this status; unrecognized values match as-is
            search: Substring to look for in title or content
            limit: Maximum number of meetings
            offset: Number of meetings to skip (page size 10 without a limit)

        Returns:
            ApiResponse[list[MeetingMinute]]
        """

        async def work(session: AsyncSession) -> list[MeetingMinute]:
            status_value = status.value if isinstance(status, MeetingStatus) else status
            meetings = await meeting_crud.get_filtered(
                session,
                status=status_value,
                search=search,
                limit=limit,
                offset=offset,
            )
            return [MeetingMinute.model_validate(m) for m in meetings]

        return await self.execute(
            "get_all", work, status=status, search=search, limit=limit, offset=offset
        )

    async def get_by_id(self, meeting_id: UUID | str) -> ApiResponse[MeetingMinuteDetail]:
        """
        Get a meeting minute with its attendees flattened in.

        Args:
            meeting_id: Meeting id (UUID or its string form)

        Returns:
            ApiResponse[MeetingMinuteDetail]; failure if no meeting matches
        """

        async def work(session: AsyncSession) -> MeetingMinuteDetail:
            record_id = coerce_id(meeting_id)
            meeting = await meeting_crud.get_with_attendees(session, record_id)
            if meeting is None:
                raise RecordNotFoundError(self.entity_name, record_id)
            return flatten_meeting_detail(meeting)

        return await self.execute("get_by_id", work, meeting_id=meeting_id)

    async def create(
        self,
        payload: MeetingMinuteCreate | dict[str, Any],
    ) -> ApiResponse[MeetingMinute]:
        """
        Create a meeting minute.

        Args:
            payload: Fields of the new meeting (no id or timestamps)

        Returns:
            ApiResponse[MeetingMinute]: The persisted row with generated fields
        """

        async def work(session: AsyncSession) -> MeetingMinute:
            data = coerce_payload(payload, MeetingMinuteCreate)
            meeting = await meeting_crud.create(session, **data.model_dump())
            logger.info(
                "Meeting minute created",
                extra={"meeting_id": str(meeting.id), "status": meeting.status},
            )
            return MeetingMinute.model_validate(meeting)

        return await self.execute("create", work)

    async def update(
        self,
        meeting_id: UUID | str,
        payload: MeetingMinuteUpdate | dict[str, Any],
    ) -> ApiResponse[MeetingMinute]:
        """
        Change only the supplied fields of a meeting minute.

        Args:
            meeting_id: Meeting id (UUID or its string form)
            payload: Fields to change; omitted fields are left as they are

        Returns:
            ApiResponse[MeetingMinute]: The full row after the update
        """

        async def work(session: AsyncSession) -> MeetingMinute:
            record_id = coerce_id(meeting_id)
            updates = coerce_payload(payload, MeetingMinuteUpdate).model_dump(exclude_unset=True)
            meeting = await meeting_crud.update_by_id(session, record_id, **updates)
            if meeting is None:
                raise RecordNotFoundError(self.entity_name, record_id)
            return MeetingMinute.model_validate(meeting)

        return await self.execute("update", work, meeting_id=meeting_id)

    async def delete(self, meeting_id: UUID | str) -> ApiResponse[None]:
        """
        Delete a meeting minute and its attendee links.

        Deleting a meeting that does not exist also succeeds.

        Args:
            meeting_id: Meeting id (UUID or its string form)

        Returns:
            ApiResponse[None]
        """

        async def work(session: AsyncSession) -> None:
            await meeting_crud.delete_by_id(session, coerce_id(meeting_id))
            return None

        return await self.execute("delete", work, meeting_id=meeting_id)

    async def duplicate(self, meeting_id: UUID | str) -> ApiResponse[MeetingMinute]:
        """
        Copy a meeting minute as a new draft.

        The copy keeps every field of the source except identity and
        timestamps (regenerated), title (suffixed with " (Copy)") and
        status (always draft). The source row is not modified.

        Args:
            meeting_id: UUID of the meeting to copy

        Returns:
            ApiResponse[MeetingMinute]: The new row
        """

        async def work(session: AsyncSession) -> MeetingMinute:
            record_id = coerce_id(meeting_id)
            original = await meeting_crud.get_by_id(session, record_id)
            if original is None:
                raise RecordNotFoundError(self.entity_name, record_id)

            values = _column_values(original)
            for key in _STORE_ASSIGNED:
                values.pop(key, None)
            values["title"] = f"{original.title}{COPY_SUFFIX}"
            values["status"] = MeetingStatus.DRAFT.value
            if values.get("tags") is not None:
                values["tags"] = list(values["tags"])

            copy = await meeting_crud.create(session, **values)
            logger.info(
                "Meeting minute duplicated",
                extra={"source_id": str(meeting_id), "meeting_id": str(copy.id)},
            )
            return MeetingMinute.model_validate(copy)

        return await self.execute("duplicate", work, meeting_id=meeting_id)

    async def get_stats(self) -> ApiResponse[MeetingStats]:
        """
        Count meeting minutes in total and per status.

        Only the status column is fetched.

        Returns:
            ApiResponse[MeetingStats]
        """

        async def work(session: AsyncSession) -> MeetingStats:
            statuses = await meeting_crud.get_statuses(session)
            return count_statuses(list(statuses))

        return await self.execute("get_stats", work)
