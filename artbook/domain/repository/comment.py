"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from artbook.domain.model.comment import Comment
from artbook.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, post_id: PostId, limit: int, offset: int
    ) -> List[Comment]:
        """Find one page of top-level comments for a post, newest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(self, post_id: PostId) -> int:
        """Count top-level comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments without a parent
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies of several comments (batch query), oldest first.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies whose parent is in ``parent_ids``, ordered by created_at
        """
        pass

    @abstractmethod
    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count direct replies per comment (batch query).

        Args:
            comment_ids: Comment IDs to count replies for

        Returns:
            Mapping of comment ID to reply count; every requested ID is present
        """
        pass

    @abstractmethod
    async def has_replies(self, comment_id: CommentId) -> bool:
        """Check whether any comment has ``comment_id`` as its parent."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments (any depth) for a post."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> Dict[PostId, int]:
        """Count all comments per post (batch query)."""
        pass

    @abstractmethod
    async def find_ids_by_post(self, post_id: PostId) -> List[CommentId]:
        """List the IDs of every comment on a post."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and bump ``updated_at``.

        Args:
            comment_id: Comment ID
            content: New (already sanitized) content

        Returns:
            Updated comment, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Returns:
            Number of comments deleted
        """
        pass
