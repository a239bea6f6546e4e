"""PostgreSQL implementation of User repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import User
from artbook.domain.repository import UserRepository
from artbook.domain.value import UserId
from artbook.persistence.mappers import row_to_user, user_to_dict
from artbook.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Find several users in one query."""
        if not user_ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        users = [row_to_user(row._asdict()) for row in result.fetchall()]
        return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
