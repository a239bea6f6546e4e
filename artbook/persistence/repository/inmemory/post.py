"""In-memory post repository for testing."""

from typing import Optional, Sequence

from artbook.domain.model.post import Post
from artbook.domain.repository.post import PostRepository
from artbook.domain.value import ArtbookId, PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_artbook(self, artbook_id: ArtbookId) -> Optional[Post]:
        """Find the post belonging to an artbook."""
        for post in self._store.posts.values():
            if post.artbook_id == artbook_id:
                return post
        return None

    async def find_by_artbooks(
        self, artbook_ids: Sequence[ArtbookId]
    ) -> dict[ArtbookId, Post]:
        """Find posts for several artbooks."""
        wanted = set(artbook_ids)
        return {
            post.artbook_id: post
            for post in self._store.posts.values()
            if post.artbook_id in wanted
        }

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._store.posts[post.id] = post
        return post

    async def increment_views(self, post_id: PostId) -> Optional[int]:
        """Increment views by 1."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"views": post.views + 1})
        self._store.posts[post_id] = updated
        return updated.views

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._store.posts.pop(post_id, None) is not None
