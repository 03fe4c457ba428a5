"""
Attendee API endpoints.

Routes:
- GET /attendees - List attendees (search, limit, offset)
- POST /attendees - Create attendee
- GET /attendees/{id} - Get attendee
- PATCH /attendees/{id} - Partial update
- DELETE /attendees/{id} - Delete attendee

Dependencies: meeting_minutes.application.services, meeting_minutes.models
System role: Attendee HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from meeting_minutes.api.deps.dependencies import get_attendee_service
from meeting_minutes.application.services import AttendeeService
from meeting_minutes.models.attendee import AttendeeCreate, AttendeeUpdate

from .router_utils import envelope_response

router = APIRouter(prefix="/attendees", tags=["attendees"])


@router.get("")
async def list_attendees(
    search: str | None = None,
    limit: int | None = Query(None, ge=1),
    offset: int | None = Query(None, ge=0),
    attendee_service: AttendeeService = Depends(get_attendee_service),
):
    """List attendees by name."""
    result = await attendee_service.get_all(search=search, limit=limit, offset=offset)
    return envelope_response(result)


@router.post("")
async def create_attendee(
    request: AttendeeCreate,
    attendee_service: AttendeeService = Depends(get_attendee_service),
):
    """Create an attendee."""
    result = await attendee_service.create(request)
    return envelope_response(result, status.HTTP_201_CREATED)


@router.get("/{attendee_id}")
async def get_attendee(
    attendee_id: UUID,
    attendee_service: AttendeeService = Depends(get_attendee_service),
):
    """Get an attendee."""
    return envelope_response(await attendee_service.get_by_id(attendee_id))


@router.patch("/{attendee_id}")
async def update_attendee(
    attendee_id: UUID,
    request: AttendeeUpdate,
    attendee_service: AttendeeService = Depends(get_attendee_service),
):
    """Update only the supplied fields of an attendee."""
    return envelope_response(await attendee_service.update(attendee_id, request))


@router.delete("/{attendee_id}")
async def delete_attendee(
    attendee_id: UUID,
    attendee_service: AttendeeService = Depends(get_attendee_service),
):
    """Delete an attendee."""
    return envelope_response(await attendee_service.delete(attendee_id))
