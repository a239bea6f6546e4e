"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import Comment
from artbook.domain.repository import CommentRepository
from artbook.domain.value import CommentId, PostId
from artbook.persistence.mappers import comment_to_dict, row_to_comment
from artbook.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self, post_id: PostId, limit: int, offset: int
    ) -> List[Comment]:
        """Find one page of top-level comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count top-level comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies of several comments, oldest first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count direct replies per comment."""
        counts: Dict[CommentId, int] = {cid: 0 for cid in comment_ids}
        if not comment_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_id, func.count())
            .where(comments_table.c.parent_id.in_(comment_ids))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether a comment has at least one reply."""
        stmt = select(
            select(comments_table.c.id)
            .where(comments_table.c.parent_id == comment_id)
            .exists()
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments (any depth) for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count comments per post."""
        counts: Dict[PostId, int] = {pid: 0 for pid in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(comments_table.c.post_id, func.count())
            .where(comments_table.c.post_id.in_(post_ids))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for post_id, count in result.fetchall():
            counts[PostId(post_id)] = count
        return counts

    async def find_ids_by_post(self, post_id: PostId) -> List[CommentId]:
        """List comment IDs on a post."""
        stmt = select(comments_table.c.id).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [CommentId(row[0]) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Replies reference their parents, so the whole set goes in one
        statement and the foreign key check runs at statement end.
        """
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
