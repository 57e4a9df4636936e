"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime, tzinfo
from typing import Optional

from app.domain.users.entities import User
from app.domain.users.results import ServiceResult


class UserService(ABC):
    """Port owning persistence and business rules for users.

    Every operation returns a tagged result. Implementations must not
    let store failures escape as exceptions.
    """

    @abstractmethod
    def find_by_id(self, user_id: str) -> ServiceResult[Optional[User]]:
        """Return the user with the given id, or Ok(None) when absent."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> ServiceResult[list[User]]:
        """Return every user in store order."""
        raise NotImplementedError

    @abstractmethod
    def save(self, user: User) -> ServiceResult[User]:
        """Persist a new user and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> ServiceResult[User]:
        """Replace an existing user and return the stored value."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, user_id: str) -> ServiceResult[None]:
        """Delete a user. Deleting an unknown id is not a failure."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port for storing users.

    Repositories raise UserDomainError subclasses on failure.
    """

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        """Return the stored user or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return all users ordered by insertion."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> User:
        """Insert a user whose id is already assigned."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, user: User) -> User:
        """Overwrite an existing user.

        Raises:
            UserNotFoundError: If no user with ``user.id`` exists.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, user_id: str) -> None:
        """Remove a user if present."""
        raise NotImplementedError


class Clock(ABC):
    """Port for reading the current time.

    Injected wherever a timestamp is produced so that tests can freeze it.
    """

    @property
    @abstractmethod
    def zone(self) -> tzinfo:
        """Return the zone used to express ``now()``."""
        raise NotImplementedError

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime in ``zone``."""
        raise NotImplementedError
