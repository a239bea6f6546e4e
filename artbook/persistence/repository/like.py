"""PostgreSQL implementations of the like repositories."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import CommentLike, Like
from artbook.domain.repository import CommentLikeRepository, LikeRepository
from artbook.domain.value import CommentId, PostId, UserId
from artbook.persistence.mappers import (
    comment_like_to_dict,
    like_to_dict,
    row_to_comment_like,
    row_to_like,
)
from artbook.persistence.tables import comment_likes_table, likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        stmt = select(likes_table).where(
            and_(likes_table.c.user_id == user_id, likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        The insert runs in a savepoint so a unique violation leaves the
        request transaction usable for the follow-up count.
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post."""
        stmt = delete(likes_table).where(
            and_(likes_table.c.user_id == user_id, likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count likes per post (batch query)."""
        counts: Dict[PostId, int] = {pid: 0 for pid in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(likes_table.c.post_id, func.count())
            .where(likes_table.c.post_id.in_(post_ids))
            .group_by(likes_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for post_id, count in result.fetchall():
            counts[PostId(post_id)] = count
        return counts

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        stmt = delete(likes_table).where(likes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a comment like (create) inside a savepoint."""
        stmt = insert(comment_likes_table).values(**comment_like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment (batch query)."""
        counts: Dict[CommentId, int] = {cid: 0 for cid in comment_ids}
        if not comment_ids:
            return counts

        stmt = (
            select(comment_likes_table.c.comment_id, func.count())
            .where(comment_likes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        for comment_id, count in result.fetchall():
            counts[CommentId(comment_id)] = count
        return counts

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentLike]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_like(row._asdict()) for row in result.fetchall()]

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete every like on the given comments."""
        if not comment_ids:
            return 0

        stmt = delete(comment_likes_table).where(
            comment_likes_table.c.comment_id.in_(comment_ids)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
