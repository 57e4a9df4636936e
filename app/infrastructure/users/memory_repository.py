"""
Adapter: In-memory user repository.

Implements UserRepository port with a dict guarded by a lock.
Used by default for local development and in tests.
"""

import threading
from typing import Optional

from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError, UserPersistenceError
from app.domain.users.ports import UserRepository


class InMemoryUserRepository(UserRepository):
    """Keeps users in process memory, ordered by insertion."""

    def __init__(self, users: Optional[list[User]] = None) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        for user in users or []:
            self.add(user)

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def add(self, user: User) -> User:
        if user.id is None:
            raise UserPersistenceError("Cannot store a user without an id")
        with self._lock:
            if user.id in self._users:
                raise UserPersistenceError(f"User with id {user.id} already exists")
            self._users[user.id] = user
        return user

    def replace(self, user: User) -> User:
        with self._lock:
            if user.id is None or user.id not in self._users:
                raise UserNotFoundError(str(user.id))
            # dict keeps the original insertion slot on overwrite
            self._users[user.id] = user
        return user

    def remove(self, user_id: str) -> None:
        with self._lock:
            self._users.pop(user_id, None)
