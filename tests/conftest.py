"""
Shared fixtures for the users API tests.

The UserService collaborator is a MagicMock constrained to the port,
and the clock is frozen so ApiError timestamps are predictable.
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.domain.users.entities import User
from app.domain.users.ports import UserService
from app.infrastructure.clock import FixedClock
from app.main import create_app
from app.shared.security.rate_limiting import limiter

TOKYO = timezone(timedelta(hours=9))
FROZEN_INSTANT = datetime(2023, 2, 21, 15, 12, tzinfo=timezone.utc)
USER_ID = "22496506-b296-11ed-afa1-0242ac120002"


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Start every test with empty slowapi counters."""
    limiter.reset()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(FROZEN_INSTANT, zone=TOKYO)


@pytest.fixture
def neil() -> User:
    return User(
        id=USER_ID,
        first_name="Neil",
        last_name="Armstrong",
        date_of_birth=date(1930, 8, 5),
    )


@pytest.fixture
def buzz() -> User:
    return User(
        id="USER_ID_2",
        first_name="Edwin",
        last_name="Aldrin",
        date_of_birth=date(1930, 1, 20),
    )


@pytest.fixture
def user_service() -> MagicMock:
    return MagicMock(spec=UserService)


@pytest.fixture
def client(user_service: MagicMock, clock: FixedClock) -> TestClient:
    """TestClient over an app wired to the mocked service and frozen clock."""
    return TestClient(create_app(user_service=user_service, clock=clock))
