"""
Tests for the users infrastructure adapters.

The SQL repository runs against a throwaway SQLite file.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError, UserPersistenceError
from app.domain.users.ports import UserRepository
from app.infrastructure.clock import FixedClock, SystemClock
from app.infrastructure.users.memory_repository import InMemoryUserRepository
from app.infrastructure.users.sql_repository import SqlUserRepository


@pytest.fixture
def sql_repository(tmp_path: Path) -> SqlUserRepository:
    engine = create_engine(f"sqlite:///{tmp_path / 'users.db'}")
    repository = SqlUserRepository(engine=engine)
    repository.create_schema()
    return repository


@pytest.fixture(params=["memory", "sql"])
def repository(request, sql_repository: SqlUserRepository) -> UserRepository:
    if request.param == "memory":
        return InMemoryUserRepository()
    return sql_repository


class TestUserRepositories:
    """Behaviour shared by every UserRepository adapter."""

    def test_add_then_get(self, repository: UserRepository, neil: User) -> None:
        repository.add(neil)

        assert repository.get(neil.id) == neil
        assert repository.get("missing") is None

    def test_list_all_in_insertion_order(
        self, repository: UserRepository, neil: User, buzz: User
    ) -> None:
        repository.add(buzz)
        repository.add(neil)

        assert repository.list_all() == [buzz, neil]

    def test_replace_keeps_position(
        self, repository: UserRepository, neil: User, buzz: User
    ) -> None:
        repository.add(neil)
        repository.add(buzz)
        renamed = replace(neil, first_name="Neil A.")

        assert repository.replace(renamed) == renamed
        assert repository.list_all() == [renamed, buzz]

    def test_replace_unknown_raises(self, repository: UserRepository, neil: User) -> None:
        with pytest.raises(UserNotFoundError):
            repository.replace(neil)

    def test_remove_is_idempotent(self, repository: UserRepository, neil: User) -> None:
        repository.add(neil)

        repository.remove(neil.id)
        repository.remove(neil.id)

        assert repository.list_all() == []

    def test_add_without_id_raises(self, repository: UserRepository, neil: User) -> None:
        with pytest.raises(UserPersistenceError):
            repository.add(replace(neil, id=None))

    def test_duplicate_id_raises(self, repository: UserRepository, neil: User) -> None:
        repository.add(neil)

        with pytest.raises(UserPersistenceError):
            repository.add(neil)


class TestSqlUserRepository:
    """SQL-specific behaviour."""

    def test_data_survives_new_repository(self, tmp_path: Path, neil: User) -> None:
        url = f"sqlite:///{tmp_path / 'persist.db'}"
        first = SqlUserRepository(engine=create_engine(url))
        first.create_schema()
        first.add(neil)

        second = SqlUserRepository(engine=create_engine(url))
        second.create_schema()

        assert second.get(neil.id) == neil

    def test_missing_table_is_persistence_error(self, tmp_path: Path) -> None:
        repository = SqlUserRepository(
            engine=create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
        )

        with pytest.raises(UserPersistenceError, match="Failed to list users"):
            repository.list_all()


class TestClocks:
    """Tests for the Clock adapters."""

    def test_fixed_clock_converts_to_zone(self) -> None:
        tokyo = timezone(timedelta(hours=9))
        clock = FixedClock(datetime(2023, 2, 21, 15, 12, tzinfo=timezone.utc), zone=tokyo)

        now = clock.now()

        assert now == datetime(2023, 2, 22, 0, 12, tzinfo=tokyo)
        assert now.utcoffset() == timedelta(hours=9)
        assert clock.now() == now

    def test_fixed_clock_reads_naive_as_utc(self) -> None:
        clock = FixedClock(datetime(2023, 2, 21, 15, 12))

        assert clock.now() == datetime(2023, 2, 21, 15, 12, tzinfo=timezone.utc)
        assert clock.zone is timezone.utc

    def test_system_clock_is_aware(self) -> None:
        before = datetime.now(timezone.utc)
        now = SystemClock().now()

        assert now.tzinfo is not None
        assert now >= before
