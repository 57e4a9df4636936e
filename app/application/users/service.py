"""
Use case service: CRUD operations on users.

Input: User entities and ids.
Output: Ok/Err service results.
Side effects: Writes to the injected UserRepository.
Failure cases: UserNotFoundError on update (reported as NOT_FOUND),
    any other repository error (reported as UNEXPECTED).
"""

import logging
from dataclasses import replace
from typing import Callable, Optional
from uuid import uuid4

from app.domain.users.entities import User
from app.domain.users.errors import UserNotFoundError
from app.domain.users.ports import UserRepository, UserService
from app.domain.users.results import Err, Ok, ServiceFailure, ServiceResult

logger = logging.getLogger(__name__)


def _new_user_id() -> str:
    return str(uuid4())


class UserCrudService(UserService):
    """Implements the UserService port on top of a UserRepository.

    Assigns identifiers on save and converts repository exceptions
    into Err results so that no store failure escapes as an exception.
    """

    def __init__(
        self,
        repository: UserRepository,
        id_factory: Callable[[], str] = _new_user_id,
    ) -> None:
        self._repository = repository
        self._id_factory = id_factory

    def find_by_id(self, user_id: str) -> ServiceResult[Optional[User]]:
        try:
            return Ok(self._repository.get(user_id))
        except Exception as exc:
            return self._failure("find_by_id", exc)

    def find_all(self) -> ServiceResult[list[User]]:
        try:
            return Ok(self._repository.list_all())
        except Exception as exc:
            return self._failure("find_all", exc)

    def save(self, user: User) -> ServiceResult[User]:
        """Persist a new user under a freshly generated id.

        Any id carried by ``user`` is ignored; identity is always
        assigned here.
        """
        to_store = replace(user, id=self._id_factory())
        try:
            saved = self._repository.add(to_store)
        except Exception as exc:
            return self._failure("save", exc)
        logger.info("Created user id=%s", saved.id)
        return Ok(saved)

    def update(self, user: User) -> ServiceResult[User]:
        try:
            updated = self._repository.replace(user)
        except UserNotFoundError as exc:
            logger.warning("Update of unknown user id=%s", exc.user_id)
            return Err(ServiceFailure.not_found(exc.message))
        except Exception as exc:
            return self._failure("update", exc)
        logger.info("Updated user id=%s", updated.id)
        return Ok(updated)

    def delete_by_id(self, user_id: str) -> ServiceResult[None]:
        try:
            self._repository.remove(user_id)
        except Exception as exc:
            return self._failure("delete_by_id", exc)
        logger.info("Deleted user id=%s", user_id)
        return Ok(None)

    @staticmethod
    def _failure(operation: str, exc: Exception) -> Err[ServiceFailure]:
        logger.error("User %s failed: %s", operation, exc)
        return Err(ServiceFailure.unexpected(str(exc)))
