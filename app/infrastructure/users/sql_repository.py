"""
Adapter: SQL user repository.

Implements UserRepository port using SQLAlchemy Core.
Works against any database SQLAlchemy supports (SQLite locally,
PostgreSQL through psycopg in deployment).
"""

import logging
from typing import Optional

from sqlalchemy import (
    Column,
    Date,
    Integer,
    MetaData,
    String,
    Table,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError, UserPersistenceError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(36), nullable=False, unique=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("date_of_birth", Date, nullable=False),
)


def _row_to_user(row: Row) -> User:
    return User(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        date_of_birth=row.date_of_birth,
    )


class SqlUserRepository(UserRepository):
    """Persists users in the ``users`` table.

    The ``seq`` column keeps insertion order so that ``list_all``
    returns users in the order they were created.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the users table if it does not exist yet."""
        metadata.create_all(self._engine)
        logger.info("Users table ready.")

    def get(self, user_id: str) -> Optional[User]:
        query = select(users_table).where(users_table.c.id == user_id)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise UserPersistenceError(f"Failed to read user {user_id}") from exc
        return _row_to_user(row) if row is not None else None

    def list_all(self) -> list[User]:
        query = select(users_table).order_by(users_table.c.seq)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).fetchall()
        except SQLAlchemyError as exc:
            raise UserPersistenceError("Failed to list users") from exc
        return [_row_to_user(row) for row in rows]

    def add(self, user: User) -> User:
        if user.id is None:
            raise UserPersistenceError("Cannot store a user without an id")
        statement = insert(users_table).values(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            date_of_birth=user.date_of_birth,
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as exc:
            raise UserPersistenceError(f"Failed to insert user {user.id}") from exc
        return user

    def replace(self, user: User) -> User:
        statement = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(
                first_name=user.first_name,
                last_name=user.last_name,
                date_of_birth=user.date_of_birth,
            )
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise UserPersistenceError(f"Failed to update user {user.id}") from exc
        if result.rowcount == 0:
            raise UserNotFoundError(str(user.id))
        return user

    def remove(self, user_id: str) -> None:
        statement = delete(users_table).where(users_table.c.id == user_id)
        try:
            with self._engine.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as exc:
            raise UserPersistenceError(f"Failed to delete user {user_id}") from exc
