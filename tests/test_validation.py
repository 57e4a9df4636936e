"""
Tests for parse-then-validate of user write payloads.
"""

from datetime import date

import pytest

from app.domain.users.results import Err, Ok
from app.interfaces.users.validation import (
    ValidationIssue,
    ValidationMode,
    parse_user_payload,
)

VALID = {"firstName": "Neil", "lastName": "Armstrong", "dateOfBirth": "1930-08-05"}


class TestCreateMode:
    """Validation rules for POST /users."""

    def test_valid_payload_parsed(self) -> None:
        result = parse_user_payload(VALID, ValidationMode.CREATE)

        assert isinstance(result, Ok)
        assert result.value.first_name == "Neil"
        assert result.value.date_of_birth == date(1930, 8, 5)
        assert result.value.id is None

    def test_id_not_allowed(self) -> None:
        result = parse_user_payload({**VALID, "id": "abc"}, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.ID_NOT_ALLOWED,)
        assert result.error.message.lower().startswith("validation failed")

    def test_every_missing_field_reported(self) -> None:
        result = parse_user_payload({}, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (
            ValidationIssue.FIRST_NAME_REQUIRED,
            ValidationIssue.LAST_NAME_REQUIRED,
            ValidationIssue.DATE_OF_BIRTH_REQUIRED,
        )

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_first_name_rejected(self, blank) -> None:
        result = parse_user_payload({**VALID, "firstName": blank}, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.FIRST_NAME_REQUIRED,)

    def test_unparsable_date_rejected(self) -> None:
        result = parse_user_payload(
            {**VALID, "dateOfBirth": "5th of August"}, ValidationMode.CREATE
        )

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.DATE_OF_BIRTH_INVALID,)

    @pytest.mark.parametrize("raw", [None, [], "user", 42])
    def test_non_object_body_rejected(self, raw) -> None:
        result = parse_user_payload(raw, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.MALFORMED_BODY,)


class TestUpdateMode:
    """Validation rules for PUT /users."""

    def test_id_required(self) -> None:
        result = parse_user_payload(VALID, ValidationMode.UPDATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.ID_REQUIRED,)

    def test_valid_payload_keeps_id(self) -> None:
        result = parse_user_payload({**VALID, "id": "abc"}, ValidationMode.UPDATE)

        assert isinstance(result, Ok)
        assert result.value.id == "abc"

    def test_message_lists_issues(self) -> None:
        result = parse_user_payload({"id": "abc", "lastName": ""}, ValidationMode.UPDATE)

        assert isinstance(result, Err)
        assert result.error.message == (
            "Validation failed: firstName must not be blank; "
            "lastName must not be blank; dateOfBirth is required"
        )


class TestWireContract:
    """Only the documented JSON shape is accepted."""

    def test_empty_id_not_allowed_on_create(self) -> None:
        result = parse_user_payload({**VALID, "id": ""}, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.ID_NOT_ALLOWED,)

    def test_blank_id_missing_on_update(self) -> None:
        result = parse_user_payload({**VALID, "id": " "}, ValidationMode.UPDATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.ID_REQUIRED,)

    @pytest.mark.parametrize("mode", list(ValidationMode))
    def test_non_string_id_is_invalid(self, mode: ValidationMode) -> None:
        result = parse_user_payload({**VALID, "id": 123}, mode)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.ID_INVALID,)

    @pytest.mark.parametrize(
        "value", [0, 19300805, "1930-08-05T00:00:00", "1930-8-5", "1930-02-30", "1930-08-05\n"]
    )
    def test_date_must_be_iso_calendar_date(self, value) -> None:
        result = parse_user_payload({**VALID, "dateOfBirth": value}, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (ValidationIssue.DATE_OF_BIRTH_INVALID,)

    def test_snake_case_keys_ignored(self) -> None:
        raw = {"first_name": "Neil", "last_name": "Armstrong", "date_of_birth": "1930-08-05"}

        result = parse_user_payload(raw, ValidationMode.CREATE)

        assert isinstance(result, Err)
        assert result.error.issues == (
            ValidationIssue.FIRST_NAME_REQUIRED,
            ValidationIssue.LAST_NAME_REQUIRED,
            ValidationIssue.DATE_OF_BIRTH_REQUIRED,
        )
