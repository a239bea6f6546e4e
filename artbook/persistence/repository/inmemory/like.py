"""In-memory like repositories for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from artbook.domain.model.like import CommentLike, Like
from artbook.domain.repository.like import CommentLikeRepository, LikeRepository
from artbook.domain.value import CommentId, PostId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        for like in self._store.likes:
            if like.user_id == user_id and like.post_id == post_id:
                return like
        return None

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the post (duplicate)
        """
        if await self.find_by_user_and_post(like.user_id, like.post_id):
            raise IntegrityError("Duplicate like", None, Exception())
        self._store.likes.append(like)
        return like

    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post."""
        for i, like in enumerate(self._store.likes):
            if like.user_id == user_id and like.post_id == post_id:
                self._store.likes.pop(i)
                return True
        return False

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._store.likes if like.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes per post."""
        counts = {pid: 0 for pid in post_ids}
        for like in self._store.likes:
            if like.post_id in counts:
                counts[like.post_id] += 1
        return counts

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        before = len(self._store.likes)
        self._store.likes[:] = [
            like for like in self._store.likes if like.post_id != post_id
        ]
        return before - len(self._store.likes)


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        for like in self._store.comment_likes:
            if like.user_id == user_id and like.comment_id == comment_id:
                return like
        return None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a comment like.

        Raises:
            IntegrityError: If the user already likes the comment (duplicate)
        """
        if await self.find_by_user_and_comment(like.user_id, like.comment_id):
            raise IntegrityError("Duplicate comment like", None, Exception())
        self._store.comment_likes.append(like)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        for i, like in enumerate(self._store.comment_likes):
            if like.user_id == user_id and like.comment_id == comment_id:
                self._store.comment_likes.pop(i)
                return True
        return False

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes per comment."""
        counts = {cid: 0 for cid in comment_ids}
        for like in self._store.comment_likes:
            if like.comment_id in counts:
                counts[like.comment_id] += 1
        return counts

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[CommentLike]:
        """Find a user's likes on multiple comments."""
        wanted = set(comment_ids)
        return [
            like
            for like in self._store.comment_likes
            if like.user_id == user_id and like.comment_id in wanted
        ]

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete every like on the given comments."""
        doomed = set(comment_ids)
        before = len(self._store.comment_likes)
        self._store.comment_likes[:] = [
            like for like in self._store.comment_likes if like.comment_id not in doomed
        ]
        return before - len(self._store.comment_likes)
