"""PostgreSQL implementation of Artbook repository."""

from collections import defaultdict
from typing import List, Optional, Sequence

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import Artbook, Page
from artbook.domain.repository import ArtbookRepository
from artbook.domain.value import ArtbookId, Category, Slug, UserId
from artbook.persistence.mappers import (
    artbook_to_dict,
    page_to_dict,
    row_to_artbook,
    row_to_page,
)
from artbook.persistence.tables import artbooks_table, pages_table


class PostgresArtbookRepository(ArtbookRepository):
    """PostgreSQL implementation of ArtbookRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load_pages(
        self, artbook_ids: Sequence[ArtbookId]
    ) -> dict[ArtbookId, list[Page]]:
        """Load pages for several artbooks in one query."""
        pages: dict[ArtbookId, list[Page]] = defaultdict(list)
        if not artbook_ids:
            return pages

        stmt = (
            select(pages_table)
            .where(pages_table.c.artbook_id.in_(artbook_ids))
            .order_by(pages_table.c.page_number)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            page = row_to_page(row._asdict())
            pages[page.artbook_id].append(page)
        return pages

    async def _find_one(self, stmt) -> Optional[Artbook]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        data = row._asdict()
        pages = await self._load_pages([data["id"]])
        return row_to_artbook(data, pages.get(data["id"], []))

    async def find_by_id(self, artbook_id: ArtbookId) -> Optional[Artbook]:
        """Find an artbook by ID."""
        return await self._find_one(
            select(artbooks_table).where(artbooks_table.c.id == artbook_id)
        )

    async def find_by_slug(self, slug: Slug) -> Optional[Artbook]:
        """Find an artbook by slug."""
        return await self._find_one(
            select(artbooks_table).where(artbooks_table.c.slug == slug.root)
        )

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[ArtbookId] = None
    ) -> bool:
        """Check if a slug is taken by another artbook."""
        inner = select(artbooks_table.c.id).where(artbooks_table.c.slug == slug.root)
        if exclude_id is not None:
            inner = inner.where(artbooks_table.c.id != exclude_id)
        result = await self.session.execute(select(inner.exists()))
        return bool(result.scalar())

    async def find_all(
        self,
        category: Optional[Category] = None,
        author_id: Optional[UserId] = None,
        is_public: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Artbook]:
        """List artbooks newest first."""
        stmt = select(artbooks_table)
        if category is not None:
            stmt = stmt.where(artbooks_table.c.category == category.value)
        if author_id is not None:
            stmt = stmt.where(artbooks_table.c.author_id == author_id)
        if is_public is not None:
            stmt = stmt.where(artbooks_table.c.is_public == is_public)
        stmt = (
            stmt.order_by(desc(artbooks_table.c.created_at)).limit(limit).offset(offset)
        )

        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        pages = await self._load_pages([row["id"] for row in rows])
        return [row_to_artbook(row, pages.get(row["id"], [])) for row in rows]

    async def save(self, artbook: Artbook) -> Artbook:
        """Save an artbook and replace its pages."""
        artbook_dict = artbook_to_dict(artbook)
        exists = await self.session.execute(
            select(artbooks_table.c.id).where(artbooks_table.c.id == artbook.id)
        )

        if exists.fetchone():
            await self.session.execute(
                update(artbooks_table)
                .where(artbooks_table.c.id == artbook.id)
                .values(**artbook_dict)
            )
            await self.session.execute(
                delete(pages_table).where(pages_table.c.artbook_id == artbook.id)
            )
        else:
            await self.session.execute(insert(artbooks_table).values(**artbook_dict))

        if artbook.pages:
            await self.session.execute(
                insert(pages_table),
                [page_to_dict(page) for page in artbook.pages],
            )

        await self.session.flush()
        return artbook

    async def delete(self, artbook_id: ArtbookId) -> bool:
        """Delete an artbook and its pages."""
        await self.session.execute(
            delete(pages_table).where(pages_table.c.artbook_id == artbook_id)
        )
        result = await self.session.execute(
            delete(artbooks_table).where(artbooks_table.c.id == artbook_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
