"""
Domain-specific errors for the users bounded context.

Raised by repositories and turned into ServiceFailure results
by the application service. No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserDomainError):
    """Raised when no user exists for the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User with id {user_id}")
        self.user_id = user_id


class UserPersistenceError(UserDomainError):
    """Raised when the underlying store fails to read or write users."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
