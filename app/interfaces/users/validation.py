"""
Parse-then-validate for user write payloads.

Turns a raw JSON value into either Ok(UserApiDto) or
Err(ValidationFailure). Nothing here raises on bad input; the
resource branches on the returned tag before calling the service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic import ValidationError

from app.domain.users.results import Err, Ok
from app.interfaces.users.schemas import UserApiDto

VALIDATION_FAILED = "Validation failed"


class ValidationMode(Enum):
    """Which write operation the payload is validated for."""

    CREATE = "create"
    UPDATE = "update"


class ValidationIssue(Enum):
    """A single reason a payload was rejected."""

    MALFORMED_BODY = "request body must be a JSON object"
    ID_NOT_ALLOWED = "id must not be supplied when creating a user"
    ID_REQUIRED = "id is required when updating a user"
    ID_INVALID = "id must be a string"
    FIRST_NAME_REQUIRED = "firstName must not be blank"
    LAST_NAME_REQUIRED = "lastName must not be blank"
    DATE_OF_BIRTH_REQUIRED = "dateOfBirth is required"
    DATE_OF_BIRTH_INVALID = "dateOfBirth must be an ISO calendar date"


_FIELD_ISSUES = {
    "id": ValidationIssue.ID_INVALID,
    "firstName": ValidationIssue.FIRST_NAME_REQUIRED,
    "lastName": ValidationIssue.LAST_NAME_REQUIRED,
    "dateOfBirth": ValidationIssue.DATE_OF_BIRTH_INVALID,
}


@dataclass(frozen=True)
class ValidationFailure:
    """All issues found in one payload, in detection order."""

    issues: tuple[ValidationIssue, ...]

    @property
    def message(self) -> str:
        details = "; ".join(issue.value for issue in self.issues)
        return f"{VALIDATION_FAILED}: {details}"


ValidationResult = Union[Ok[UserApiDto], Err[ValidationFailure]]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _issues_from_parse_error(exc: ValidationError) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for error in exc.errors():
        location = error.get("loc") or ()
        issue = _FIELD_ISSUES.get(str(location[0])) if location else None
        issue = issue or ValidationIssue.MALFORMED_BODY
        if issue not in issues:
            issues.append(issue)
    return issues


def parse_user_payload(raw: Any, mode: ValidationMode) -> ValidationResult:
    """Parse a JSON value into a UserApiDto and validate it for ``mode``.

    Args:
        raw: The decoded JSON body, or None when the request had none.
        mode: CREATE forbids a client id; UPDATE requires one.

    Returns:
        Ok with the parsed DTO, or Err listing every issue found.
    """
    if not isinstance(raw, dict):
        return Err(ValidationFailure((ValidationIssue.MALFORMED_BODY,)))

    try:
        # wire keys only; snake_case field names are ignored as unknown keys
        user_api = UserApiDto.model_validate(raw, by_alias=True, by_name=False)
    except ValidationError as exc:
        return Err(ValidationFailure(tuple(_issues_from_parse_error(exc))))

    issues: list[ValidationIssue] = []
    if mode is ValidationMode.CREATE and user_api.id is not None:
        issues.append(ValidationIssue.ID_NOT_ALLOWED)
    if mode is ValidationMode.UPDATE and _is_blank(user_api.id):
        issues.append(ValidationIssue.ID_REQUIRED)
    if _is_blank(user_api.first_name):
        issues.append(ValidationIssue.FIRST_NAME_REQUIRED)
    if _is_blank(user_api.last_name):
        issues.append(ValidationIssue.LAST_NAME_REQUIRED)
    if user_api.date_of_birth is None:
        issues.append(ValidationIssue.DATE_OF_BIRTH_REQUIRED)

    if issues:
        return Err(ValidationFailure(tuple(issues)))
    return Ok(user_api)
