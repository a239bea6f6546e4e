"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from artbook.domain.model.user import User
from artbook.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Users are written by the auth service; this API mostly reads them.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Find several users at once (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            Mapping of user ID to user for every ID that exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
