"""
Envelope to HTTP response mapping.

The response body is always the envelope; only the status code varies.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from meeting_minutes.models.common import ApiResponse


def envelope_status_code(result: ApiResponse, success_code: int = status.HTTP_200_OK) -> int:
    """
    Pick the HTTP status for an envelope.

    Args:
        result: Envelope returned by a service
        success_code: Status to use on success

    Returns:
        int: success_code, 404 for not-found failures, 400 for other failures
    """
    if result.success:
        return success_code
    if result.error and result.error.lower().endswith("not found"):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def envelope_response(result: ApiResponse, success_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize an envelope with the matching status code."""
    return JSONResponse(
        status_code=envelope_status_code(result, success_code),
        content=result.model_dump(mode="json"),
    )
