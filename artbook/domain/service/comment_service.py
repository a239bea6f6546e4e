"""Comment domain service."""

import logfire
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

from artbook.domain.error import (
    CommentHasRepliesError,
    DepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    ResourceMismatchError,
)
from artbook.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from artbook.domain.model.common import DomainModel
from artbook.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    UserRepository,
)
from artbook.domain.value import CommentId, PostId, UserId

from .base import Service
from .sanitizer import sanitize_comment_content

UNKNOWN_AUTHOR_NAME = "Unknown user"


class CommentAuthor(DomainModel):
    """Public author details attached to a comment."""

    id: UserId
    name: str
    image: Optional[str] = None


class AnnotatedComment(DomainModel):
    """A comment plus the derived data readers see next to it."""

    comment: Comment
    author: CommentAuthor
    reply_count: int = 0
    like_count: int = 0
    viewer_liked: bool = False


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_like_repository: Comment like repository (for annotations)
            user_repository: User repository (for author details)
        """
        self.comment_repository = comment_repository
        self.comment_like_repository = comment_like_repository
        self.user_repository = user_repository

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment_on_post(
        self, comment_id: CommentId, post_id: PostId
    ) -> Comment:
        """Get a comment and check that it belongs to the given post.

        Raises:
            NotFoundError: If the comment does not exist
            ResourceMismatchError: If the comment is on another post
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        if comment.post_id != post_id:
            logfire.warn(
                "Comment does not belong to post",
                comment_id=str(comment_id),
                comment_post_id=str(comment.post_id),
                target_post_id=str(post_id),
            )
            raise ResourceMismatchError("Comment does not belong to this artbook")
        return comment

    async def get_depth(self, comment: Comment, limit: int = MAX_COMMENT_DEPTH) -> int:
        """Derive a comment's depth by walking its parent chain.

        The walk stops after ``limit`` hops, so the result is
        ``min(actual_depth, limit)`` and the cost is bounded regardless of
        what is stored.

        Args:
            comment: Comment to measure
            limit: Maximum number of parent lookups

        Returns:
            Depth of the comment, capped at ``limit``
        """
        depth = 0
        current = comment
        while current.parent_id is not None and depth < limit:
            parent = await self.comment_repository.find_by_id(current.parent_id)
            if parent is None:
                logfire.warn(
                    "Dangling parent pointer",
                    comment_id=str(current.id),
                    parent_id=str(current.parent_id),
                )
                break
            depth += 1
            current = parent
        return depth

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Raw comment content (sanitized here)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the sanitized content is empty or too long
            NotFoundError: If the parent comment does not exist
            ResourceMismatchError: If the parent is on another post
            DepthExceededError: If the parent is already at maximum depth
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            cleaned = sanitize_comment_content(content)

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ResourceMismatchError(
                        "Parent comment does not belong to this artbook"
                    )
                parent_depth = await self.get_depth(parent)
                if parent_depth >= MAX_COMMENT_DEPTH:
                    logfire.warn(
                        "Reply would exceed maximum depth",
                        parent_id=str(parent_id),
                        parent_depth=parent_depth,
                    )
                    raise DepthExceededError(MAX_COMMENT_DEPTH)
                depth = parent_depth + 1

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=cleaned,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def update_content(
        self,
        comment_id: CommentId,
        post_id: PostId,
        requester_id: UserId,
        content: str,
    ) -> Comment:
        """Edit a comment's content. Only the author may edit.

        Raises:
            NotFoundError: If the comment does not exist
            ResourceMismatchError: If the comment is on another post
            NotAuthorizedError: If the requester is not the author
            ValidationError: If the sanitized content is empty or too long
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
            content_length=len(content),
        ):
            comment = await self.get_comment_on_post(comment_id, post_id)
            if comment.author_id != requester_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(requester_id), action="edit"
                )

            cleaned = sanitize_comment_content(content)
            updated = await self.comment_repository.update_content(comment_id, cleaned)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, post_id: PostId, requester_id: UserId
    ) -> None:
        """Delete a comment. Only the author may delete, and only leaves.

        Likes on the comment go with it.

        Raises:
            NotFoundError: If the comment does not exist
            ResourceMismatchError: If the comment is on another post
            NotAuthorizedError: If the requester is not the author
            CommentHasRepliesError: If the comment has replies
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment_on_post(comment_id, post_id)
            if comment.author_id != requester_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(requester_id), action="delete"
                )
            if await self.comment_repository.has_replies(comment_id):
                logfire.warn(
                    "Refusing to delete comment with replies",
                    comment_id=str(comment_id),
                )
                raise CommentHasRepliesError(str(comment_id))

            await self.comment_like_repository.delete_by_comments([comment_id])
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def list_top_level(
        self, post_id: PostId, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """Get one page of top-level comments, newest first, plus the total."""
        with logfire.span(
            "comment_service.list_top_level",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_top_level(
                post_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_top_level(post_id)
            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def list_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Get direct replies of several comments in one query, oldest first."""
        if not parent_ids:
            return []
        return await self.comment_repository.find_replies(list(parent_ids))

    async def annotate(
        self, comments: Sequence[Comment], viewer_id: UserId | None = None
    ) -> list[AnnotatedComment]:
        """Attach author, reply count, like count and viewer like state.

        Every lookup is a single batched query regardless of how many
        comments are passed in.

        Args:
            comments: Comments to annotate
            viewer_id: Viewing user, if authenticated

        Returns:
            Annotated comments in the same order as ``comments``
        """
        if not comments:
            return []

        with logfire.span(
            "comment_service.annotate",
            count=len(comments),
            has_viewer=viewer_id is not None,
        ):
            comment_ids = [c.id for c in comments]
            authors = await self.user_repository.find_by_ids(
                list(dict.fromkeys(c.author_id for c in comments))
            )
            reply_counts = await self.comment_repository.count_replies(comment_ids)
            like_counts = await self.comment_like_repository.count_by_comments(
                comment_ids
            )

            liked_ids: set[CommentId] = set()
            if viewer_id is not None:
                likes = await self.comment_like_repository.find_by_user_and_comments(
                    viewer_id, comment_ids
                )
                liked_ids = {like.comment_id for like in likes}

            annotated = []
            for comment in comments:
                user = authors.get(comment.author_id)
                if user is None:
                    logfire.warn(
                        "Comment author not found",
                        comment_id=str(comment.id),
                        author_id=str(comment.author_id),
                    )
                    author = CommentAuthor(id=comment.author_id, name=UNKNOWN_AUTHOR_NAME)
                else:
                    author = CommentAuthor(id=user.id, name=user.name, image=user.image)

                annotated.append(
                    AnnotatedComment(
                        comment=comment,
                        author=author,
                        reply_count=reply_counts.get(comment.id, 0),
                        like_count=like_counts.get(comment.id, 0),
                        viewer_liked=comment.id in liked_ids,
                    )
                )
            return annotated
