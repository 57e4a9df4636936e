"""
ApiError: the uniform structured error payload.

Every non-2xx response body is an ApiError. The timestamp is read from
the injected Clock when the error is built, never from the request.
"""

from datetime import datetime
from http import HTTPStatus

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.users.ports import Clock

UNKNOWN_STATUS_LABEL = "Unknown Status"


class ApiError(BaseModel):
    """Error payload returned by all error responses.

    Attributes:
        status: HTTP status code.
        label: Standard reason phrase for ``status``.
        message: Human-readable cause.
        path: Request path that produced the error.
        timestamp: Offset date-time at which the error was built.
    """

    status: int
    label: str
    message: str
    path: str
    timestamp: datetime


def reason_phrase(status: int) -> str:
    """Return the standard reason phrase, or a generic label for unlisted codes."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return UNKNOWN_STATUS_LABEL


def build_api_error(status: int, message: str, path: str, clock: Clock) -> ApiError:
    """Build an ApiError stamped with ``clock.now()``."""
    return ApiError(
        status=status,
        label=reason_phrase(status),
        message=message,
        path=path,
        timestamp=clock.now(),
    )


def api_error_response(status: int, message: str, path: str, clock: Clock) -> JSONResponse:
    """Build an ApiError and wrap it in a JSON response with the same status."""
    error = build_api_error(status, message, path, clock)
    return JSONResponse(status_code=status, content=error.model_dump(mode="json"))
