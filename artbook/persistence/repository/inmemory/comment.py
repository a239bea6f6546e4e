"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from artbook.domain.model.comment import Comment
from artbook.domain.repository.comment import CommentRepository
from artbook.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    def _oldest_first(self, comments: list[Comment]) -> list[Comment]:
        # Insertion order breaks created_at ties, like a serial id would
        position = {cid: i for i, cid in enumerate(self._comments)}
        return sorted(comments, key=lambda c: (c.created_at, position[c.id]))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self, post_id: PostId, limit: int, offset: int
    ) -> list[Comment]:
        """Find one page of top-level comments, newest first."""
        top_level = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]
        newest_first = list(reversed(self._oldest_first(top_level)))
        return newest_first[offset : offset + limit]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count top-level comments for a post."""
        return sum(
            1
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        )

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find direct replies of several comments, oldest first."""
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        return self._oldest_first(replies)

    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies per comment."""
        counts = {cid: 0 for cid in comment_ids}
        for comment in self._comments.values():
            if comment.parent_id in counts:
                counts[comment.parent_id] += 1
        return counts

    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether a comment has replies."""
        return any(c.parent_id == comment_id for c in self._comments.values())

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments per post."""
        counts = {pid: 0 for pid in post_ids}
        for comment in self._comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts

    async def find_ids_by_post(self, post_id: PostId) -> list[CommentId]:
        """List comment IDs on a post."""
        return [c.id for c in self._comments.values() if c.post_id == post_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
