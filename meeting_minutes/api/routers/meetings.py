"""
Meeting minute API endpoints.

Routes:
- GET /meetings - List meetings (status, search, limit, offset)
- POST /meetings - Create meeting
- GET /meetings/stats - Status counters
- GET /meetings/{id} - Meeting with attendees
- PATCH /meetings/{id} - Partial update
- DELETE /meetings/{id} - Delete meeting
- POST /meetings/{id}/duplicate - Copy meeting as draft
- GET /meetings/{id}/attendees - Links with nested attendee
- POST /meetings/{id}/attendees - Add attendee
- PATCH /meetings/{id}/attendees/{attendee_id} - Set attendance status
- DELETE /meetings/{id}/attendees/{attendee_id} - Remove attendee

Every route returns the service envelope as the response body.

Dependencies: meeting_minutes.application.services, meeting_minutes.models
System role: Meeting minute HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from meeting_minutes.api.deps.dependencies import (
    get_meeting_attendee_service,
    get_meeting_service,
)
from meeting_minutes.application.services import MeetingAttendeeService, MeetingService
from meeting_minutes.models.attendee import AddAttendeeRequest, AttendanceUpdate
from meeting_minutes.models.meeting import MeetingMinuteCreate, MeetingMinuteUpdate

from .router_utils import envelope_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meetings", tags=["meetings"])


@router.get("")
async def list_meetings(
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = None,
    limit: int | None = Query(None, ge=1),
    offset: int | None = Query(None, ge=0),
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """List meetings, most recent first."""
    result = await meeting_service.get_all(
        status=status_filter, search=search, limit=limit, offset=offset
    )
    return envelope_response(result)


@router.post("")
async def create_meeting(
    request: MeetingMinuteCreate,
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """Create a meeting minute."""
    result = await meeting_service.create(request)
    return envelope_response(result, status.HTTP_201_CREATED)


@router.get("/stats")
async def meeting_stats(meeting_service: MeetingService = Depends(get_meeting_service)):
    """Total and per-status meeting counts."""
    return envelope_response(await meeting_service.get_stats())


@router.get("/{meeting_id}")
async def get_meeting(
    meeting_id: UUID,
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """Get a meeting with its attendees."""
    return envelope_response(await meeting_service.get_by_id(meeting_id))


@router.patch("/{meeting_id}")
async def update_meeting(
    meeting_id: UUID,
    request: MeetingMinuteUpdate,
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """Update only the supplied fields of a meeting."""
    logger.info(
        "Updating meeting",
        extra={"meeting_id": str(meeting_id), "fields": sorted(request.model_fields_set)},
    )
    return envelope_response(await meeting_service.update(meeting_id, request))


@router.delete("/{meeting_id}")
async def delete_meeting(
    meeting_id: UUID,
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """Delete a meeting."""
    return envelope_response(await meeting_service.delete(meeting_id))


@router.post("/{meeting_id}/duplicate")
async def duplicate_meeting(
    meeting_id: UUID,
    meeting_service: MeetingService = Depends(get_meeting_service),
):
    """Copy a meeting as a new draft."""
    result = await meeting_service.duplicate(meeting_id)
    return envelope_response(result, status.HTTP_201_CREATED)


@router.get("/{meeting_id}/attendees")
async def list_meeting_attendees(
    meeting_id: UUID,
    membership_service: MeetingAttendeeService = Depends(get_meeting_attendee_service),
):
    """List a meeting's attendee links."""
    return envelope_response(await membership_service.get_by_meeting_id(meeting_id))


@router.post("/{meeting_id}/attendees")
async def add_meeting_attendee(
    meeting_id: UUID,
    request: AddAttendeeRequest,
    membership_service: MeetingAttendeeService = Depends(get_meeting_attendee_service),
):
    """Add an attendee to a meeting."""
    result = await membership_service.add_to_meeting(
        meeting_id, request.attendee_id, request.attendance_status
    )
    return envelope_response(result, status.HTTP_201_CREATED)


@router.patch("/{meeting_id}/attendees/{attendee_id}")
async def update_meeting_attendance(
    meeting_id: UUID,
    attendee_id: UUID,
    request: AttendanceUpdate,
    membership_service: MeetingAttendeeService = Depends(get_meeting_attendee_service),
):
    """Set an attendee's attendance status for a meeting."""
    result = await membership_service.update_attendance_status(
        meeting_id, attendee_id, request.attendance_status
    )
    return envelope_response(result)


@router.delete("/{meeting_id}/attendees/{attendee_id}")
async def remove_meeting_attendee(
    meeting_id: UUID,
    attendee_id: UUID,
    membership_service: MeetingAttendeeService = Depends(get_meeting_attendee_service),
):
    """Remove an attendee from a meeting."""
    return envelope_response(
        await membership_service.remove_from_meeting(meeting_id, attendee_id)
    )
