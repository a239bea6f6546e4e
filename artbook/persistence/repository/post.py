"""PostgreSQL implementation of Post repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import Post
from artbook.domain.repository import PostRepository
from artbook.domain.value import ArtbookId, PostId
from artbook.persistence.mappers import post_to_dict, row_to_post
from artbook.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_artbook(self, artbook_id: ArtbookId) -> Optional[Post]:
        """Find the post belonging to an artbook."""
        stmt = select(posts_table).where(posts_table.c.artbook_id == artbook_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_artbooks(
        self, artbook_ids: Sequence[ArtbookId]
    ) -> Dict[ArtbookId, Post]:
        """Find posts for several artbooks."""
        if not artbook_ids:
            return {}

        stmt = select(posts_table).where(posts_table.c.artbook_id.in_(artbook_ids))
        result = await self.session.execute(stmt)
        posts = [row_to_post(row._asdict()) for row in result.fetchall()]
        return {post.artbook_id: post for post in posts}

    async def save(self, post: Post) -> Post:
        """Save a post (create)."""
        await self.session.execute(insert(posts_table).values(**post_to_dict(post)))
        await self.session.flush()
        return post

    async def increment_views(self, post_id: PostId) -> Optional[int]:
        """Atomically increment views by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
            .returning(posts_table.c.views)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row[0] if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.id == post_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
