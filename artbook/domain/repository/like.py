"""Like repository interfaces."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from artbook.domain.model.like import CommentLike, Like
from artbook.domain.value import CommentId, PostId, UserId


class LikeRepository(ABC):
    """Repository for post likes."""

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            user_id: The user's ID
            post_id: The post ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Raises:
            IntegrityError: If the user already likes this post (duplicate)
        """
        pass

    @abstractmethod
    async def delete_by_user_and_post(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post.

        Returns:
            True if a like was deleted, False if no like existed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count likes per post (batch query)."""
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post.

        Returns:
            Number of likes deleted
        """
        pass


class CommentLikeRepository(ABC):
    """Repository for comment likes."""

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Save a comment like (create).

        Raises:
            IntegrityError: If the user already likes this comment (duplicate)
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment.

        Returns:
            True if a like was deleted, False if no like existed
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment (batch query).

        Args:
            comment_ids: Comment IDs to count

        Returns:
            Mapping of comment ID to like count; every requested ID is present
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentLike]:
        """Find a user's likes on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            Likes by the user on the specified comments
        """
        pass

    @abstractmethod
    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete every like on the given comments.

        Returns:
            Number of likes deleted
        """
        pass
