"""User domain service."""

import logfire

from artbook.domain.model.user import User
from artbook.domain.repository import UserRepository
from artbook.domain.value import UserId

from .base import Service


class UserService(Service):
    """Read access to accounts owned by the auth service."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Get several users at once, skipping IDs that do not exist."""
        if not user_ids:
            return {}
        return await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
