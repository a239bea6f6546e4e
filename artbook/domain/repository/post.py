"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from artbook.domain.model.post import Post
from artbook.domain.value import ArtbookId, PostId


class PostRepository(ABC):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_by_artbook(self, artbook_id: ArtbookId) -> Optional[Post]:
        """Find the post belonging to an artbook."""
        pass

    @abstractmethod
    async def find_by_artbooks(
        self, artbook_ids: Sequence[ArtbookId]
    ) -> Dict[ArtbookId, Post]:
        """Find posts for several artbooks (batch query)."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create)."""
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> Optional[int]:
        """Atomically increment the view counter.

        Uses SQL-level increment to avoid race conditions.

        Returns:
            The new view count, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Returns:
            True if a post was deleted
        """
        pass
