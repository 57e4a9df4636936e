"""
UserResource: the controller behind the /users routes.

Each method runs one fixed decision tree:
    parse/validate -> map to domain -> one service call -> map to wire.
Failures are turned into ApiError responses here, so nothing raised by
the service escapes past this class.

Failure policy:
    id lookup miss                  -> 404 "User with id {id}"
    invalid write payload           -> 400 validation summary
    service NOT_FOUND failure       -> 404 failure message
    any other failure or exception  -> 500 failure message verbatim
"""

import logging
from typing import Any, Callable, TypeVar

from fastapi import Response
from fastapi.responses import JSONResponse

from app.domain.users.ports import Clock, UserService
from app.domain.users.results import (
    Err,
    FailureKind,
    ServiceFailure,
    ServiceResult,
)
from app.interfaces.users.mapper import map_to_api, map_to_domain
from app.interfaces.users.validation import ValidationMode, parse_user_payload
from app.shared.errors.api_error import api_error_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTTP_200 = 200
HTTP_201 = 201
HTTP_204 = 204
HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


class UserResource:
    """Translates HTTP requests on users into UserService calls.

    Stateless apart from its two collaborators, so one instance can
    serve concurrent requests.

    Args:
        service: The UserService owning persistence.
        clock: Clock used to timestamp ApiError payloads.
    """

    def __init__(self, service: UserService, clock: Clock) -> None:
        self._service = service
        self._clock = clock

    def find_by_id(self, user_id: str, path: str) -> Response:
        result = self._call("find_by_id", self._service.find_by_id, user_id)
        if isinstance(result, Err):
            return self._failure_response(result.error, path)
        if result.value is None:
            logger.warning("User not found: %s", user_id)
            return self._error(HTTP_404, f"User with id {user_id}", path)
        return JSONResponse(status_code=HTTP_200, content=map_to_api(result.value).to_json())

    def find_all(self, path: str) -> Response:
        result = self._call("find_all", self._service.find_all)
        if isinstance(result, Err):
            return self._failure_response(result.error, path)
        body = [map_to_api(user).to_json() for user in result.value]
        return JSONResponse(status_code=HTTP_200, content=body)

    def create(self, payload: Any, path: str) -> Response:
        """Create a user from a payload that must not carry an id."""
        parsed = parse_user_payload(payload, ValidationMode.CREATE)
        if isinstance(parsed, Err):
            logger.warning("Rejected create payload: %s", parsed.error.message)
            return self._error(HTTP_400, parsed.error.message, path)

        result = self._call("save", self._service.save, map_to_domain(parsed.value))
        if isinstance(result, Err):
            return self._failure_response(result.error, path)
        return JSONResponse(status_code=HTTP_201, content=map_to_api(result.value).to_json())

    def update(self, payload: Any, path: str) -> Response:
        """Replace a user identified by the payload's id."""
        parsed = parse_user_payload(payload, ValidationMode.UPDATE)
        if isinstance(parsed, Err):
            logger.warning("Rejected update payload: %s", parsed.error.message)
            return self._error(HTTP_400, parsed.error.message, path)

        result = self._call("update", self._service.update, map_to_domain(parsed.value))
        if isinstance(result, Err):
            return self._failure_response(result.error, path)
        return JSONResponse(status_code=HTTP_200, content=map_to_api(result.value).to_json())

    def delete(self, user_id: str, path: str) -> Response:
        """Delete a user. Unknown ids still yield 204."""
        result = self._call("delete_by_id", self._service.delete_by_id, user_id)
        if isinstance(result, Err):
            return self._failure_response(result.error, path)
        return Response(status_code=HTTP_204)

    def _call(
        self, operation: str, method: Callable[..., ServiceResult[T]], *args: Any
    ) -> ServiceResult[T]:
        """Invoke a service method, turning a raised exception into Err."""
        try:
            return method(*args)
        except Exception as exc:
            logger.exception("UserService.%s raised %s", operation, type(exc).__name__)
            return Err(ServiceFailure.unexpected(str(exc)))

    def _failure_response(self, failure: ServiceFailure, path: str) -> Response:
        if failure.kind is FailureKind.NOT_FOUND:
            logger.warning("Service reported not found: %s", failure.message)
            return self._error(HTTP_404, failure.message, path)
        logger.error("Service failure on %s: %s", path, failure.message)
        return self._error(HTTP_500, failure.message, path)

    def _error(self, status: int, message: str, path: str) -> Response:
        return api_error_response(status, message, path, self._clock)
