"""Artbook repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from artbook.domain.model.artbook import Artbook
from artbook.domain.value import ArtbookId, Category, Slug, UserId


class ArtbookRepository(ABC):
    """Repository for the Artbook aggregate (artbook row plus its pages)."""

    @abstractmethod
    async def find_by_id(self, artbook_id: ArtbookId) -> Optional[Artbook]:
        """Find an artbook (with pages) by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Artbook]:
        """Find an artbook (with pages) by slug."""
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[ArtbookId] = None
    ) -> bool:
        """Check if a slug is taken.

        Args:
            slug: Slug to check
            exclude_id: Artbook to ignore (used when renaming an artbook)

        Returns:
            True if another artbook uses the slug
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[Category] = None,
        author_id: Optional[UserId] = None,
        is_public: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Artbook]:
        """List artbooks newest first, optionally filtered.

        Args:
            category: Only artbooks of this genre
            author_id: Only artbooks by this author
            is_public: Only public (True) or private (False) artbooks
            limit: Maximum number of artbooks to return
            offset: Number of artbooks to skip

        Returns:
            Matching artbooks with their pages
        """
        pass

    @abstractmethod
    async def save(self, artbook: Artbook) -> Artbook:
        """Save an artbook and its pages (create or update).

        On update the stored pages are replaced by ``artbook.pages``.

        Raises:
            IntegrityError: If the slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, artbook_id: ArtbookId) -> bool:
        """Delete an artbook and its pages.

        Returns:
            True if an artbook was deleted
        """
        pass
