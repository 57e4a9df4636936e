"""
Pydantic schemas for the users API.

UserApiDto is the wire representation exchanged over HTTP. Every field
is optional at parse time; requiredness is enforced by
app.interfaces.users.validation so that failures render as ApiError.
"""

import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class UserApiDto(BaseModel):
    """External JSON shape of a user.

    Attributes:
        id: Server-assigned identifier. Must be absent on create.
        first_name: Given name (``firstName`` on the wire).
        last_name: Family name (``lastName`` on the wire).
        date_of_birth: ISO calendar date (``dateOfBirth`` on the wire).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = Field(default=None, description="Server-assigned user id")
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    date_of_birth: date | None = Field(default=None, alias="dateOfBirth")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _iso_calendar_date(cls, value: Any) -> Any:
        """Accept only ``YYYY-MM-DD`` strings, or dates built by the mapper."""
        if value is None:
            return value
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if isinstance(value, str) and ISO_DATE_PATTERN.fullmatch(value):
            return value
        raise ValueError("expected an ISO calendar date (YYYY-MM-DD)")

    def to_json(self) -> dict:
        """Return the JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)
