"""
Centralized error handlers for FastAPI.

The UserResource renders its own failures. These handlers cover what
happens outside it (unknown routes, unparsable JSON, rate limits, and
anything unexpected) so that those responses are ApiError payloads too.
No stack traces or internal details beyond the failure message are
exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.interfaces.users.dependencies import get_clock
from app.interfaces.users.validation import VALIDATION_FAILED
from app.shared.errors.api_error import api_error_response

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_429 = 429
HTTP_500 = 500


def _summarize(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register the ApiError handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance. Its ``state.clock`` is
            read when each error is built.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render routing errors (404, 405, ...) as ApiError."""
        logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
        return api_error_response(
            exc.status_code, str(exc.detail), request.url.path, get_clock(request)
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Render framework-level validation errors (e.g. invalid JSON) as 400."""
        message = f"{VALIDATION_FAILED}: {_summarize(exc)}"
        logger.warning("Request validation failed on %s", request.url.path)
        return api_error_response(HTTP_400, message, request.url.path, get_clock(request))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Render slowapi rate limit rejections as 429."""
        logger.warning("Rate limit exceeded on %s", request.url.path)
        return api_error_response(
            HTTP_429,
            f"Rate limit exceeded: {exc.detail}",
            request.url.path,
            get_clock(request),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Renders the message, never the trace."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return api_error_response(HTTP_500, str(exc), request.url.path, get_clock(request))
