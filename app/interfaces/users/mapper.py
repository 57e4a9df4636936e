"""
Mapping between the User entity and the UserApiDto wire model.

Both directions are total field-for-field copies. No validation,
no side effects, inputs are never mutated.
"""

from app.domain.users.entities import User
from app.interfaces.users.schemas import UserApiDto


def map_to_api(user: User) -> UserApiDto:
    """Translate a domain user into its wire representation."""
    return UserApiDto(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        date_of_birth=user.date_of_birth,
    )


def map_to_domain(user_api: UserApiDto) -> User:
    """Translate a wire user into a domain user, keeping any id."""
    return User(
        id=user_api.id,
        first_name=user_api.first_name,
        last_name=user_api.last_name,
        date_of_birth=user_api.date_of_birth,
    )
