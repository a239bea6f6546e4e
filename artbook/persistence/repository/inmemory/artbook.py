"""In-memory artbook repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from artbook.domain.model.artbook import Artbook
from artbook.domain.repository.artbook import ArtbookRepository
from artbook.domain.value import ArtbookId, Category, Slug, UserId

from .store import InMemoryStore


class InMemoryArtbookRepository(ArtbookRepository):
    """In-memory implementation of ArtbookRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, artbook_id: ArtbookId) -> Optional[Artbook]:
        """Find an artbook by ID."""
        return self._store.artbooks.get(artbook_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Artbook]:
        """Find an artbook by slug."""
        for artbook in self._store.artbooks.values():
            if artbook.slug == slug:
                return artbook
        return None

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[ArtbookId] = None
    ) -> bool:
        """Check if a slug is taken by another artbook."""
        return any(
            a.slug == slug and a.id != exclude_id
            for a in self._store.artbooks.values()
        )

    async def find_all(
        self,
        category: Optional[Category] = None,
        author_id: Optional[UserId] = None,
        is_public: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Artbook]:
        """List artbooks newest first."""
        artbooks = [
            a
            for a in reversed(list(self._store.artbooks.values()))
            if (category is None or a.category == category)
            and (author_id is None or a.author_id == author_id)
            and (is_public is None or a.is_public == is_public)
        ]
        artbooks.sort(key=lambda a: a.created_at, reverse=True)
        return artbooks[offset : offset + limit]

    async def save(self, artbook: Artbook) -> Artbook:
        """Save an artbook.

        Raises:
            IntegrityError: If another artbook already uses the slug
        """
        if await self.slug_exists(artbook.slug, exclude_id=artbook.id):
            raise IntegrityError("Duplicate slug", None, Exception())
        self._store.artbooks[artbook.id] = artbook
        return artbook

    async def delete(self, artbook_id: ArtbookId) -> bool:
        """Delete an artbook."""
        return self._store.artbooks.pop(artbook_id, None) is not None
