"""In-memory user repository for testing."""

from typing import Optional, Sequence

from artbook.domain.model.user import User
from artbook.domain.repository.user import UserRepository
from artbook.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Find several users."""
        return {
            uid: self._store.users[uid] for uid in user_ids if uid in self._store.users
        }

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user
