"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: System-assigned identifier. None until the user is persisted,
            immutable afterwards.
        first_name: Given name, never blank once validated.
        last_name: Family name, never blank once validated.
        date_of_birth: Calendar date of birth.
    """

    id: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    date_of_birth: Optional[date]
