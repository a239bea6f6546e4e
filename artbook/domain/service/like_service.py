"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from artbook.domain.model.common import DomainModel
from artbook.domain.model.like import CommentLike, Like
from artbook.domain.repository import CommentLikeRepository, LikeRepository
from artbook.domain.value import CommentId, CommentLikeId, LikeId, PostId, UserId

from .base import Service


class LikeState(DomainModel):
    """Whether a user likes something, and how many users do."""

    liked: bool
    like_count: int


class LikeService(Service):
    """Domain service for like toggling on posts and comments.

    A like is the existence of a row. Toggling checks for the row and either
    deletes it or inserts one; the count returned afterwards is always a
    fresh aggregate, never a cached number.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Post like repository
            comment_like_repository: Comment like repository
        """
        self.like_repository = like_repository
        self.comment_like_repository = comment_like_repository

    async def toggle_post_like(self, post_id: PostId, user_id: UserId) -> LikeState:
        """Like the post if the user does not like it yet, otherwise unlike it.

        Concurrent duplicate requests are idempotent: losing the race on
        insert (unique constraint) still reports "liked", and losing it on
        delete (row already gone) reports "unliked".

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            New like state with the current like count
        """
        with logfire.span(
            "like_service.toggle_post_like", post_id=str(post_id), user_id=str(user_id)
        ):
            existing = await self.like_repository.find_by_user_and_post(
                user_id, post_id
            )

            if existing:
                deleted = await self.like_repository.delete_by_user_and_post(
                    user_id, post_id
                )
                if not deleted:
                    logfire.info(
                        "Like already removed concurrently",
                        post_id=str(post_id),
                        user_id=str(user_id),
                    )
                liked = False
            else:
                like = Like(
                    id=LikeId(uuid4()),
                    user_id=user_id,
                    post_id=post_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.like_repository.save(like)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate like attempt",
                        user_id=str(user_id),
                        post_id=str(post_id),
                    )
                liked = True

            like_count = await self.like_repository.count_by_post(post_id)
            logfire.info(
                "Post like toggled",
                post_id=str(post_id),
                user_id=str(user_id),
                liked=liked,
                like_count=like_count,
            )
            return LikeState(liked=liked, like_count=like_count)

    async def get_post_like_state(
        self, post_id: PostId, user_id: UserId | None = None
    ) -> LikeState:
        """Get a post's like count and whether the user likes it.

        Anonymous viewers (``user_id`` None) always get ``liked=False``.
        """
        like_count = await self.like_repository.count_by_post(post_id)
        liked = False
        if user_id is not None:
            liked = (
                await self.like_repository.find_by_user_and_post(user_id, post_id)
            ) is not None
        return LikeState(liked=liked, like_count=like_count)

    async def toggle_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> LikeState:
        """Like or unlike a comment. Same semantics as ``toggle_post_like``."""
        with logfire.span(
            "like_service.toggle_comment_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            existing = await self.comment_like_repository.find_by_user_and_comment(
                user_id, comment_id
            )

            if existing:
                await self.comment_like_repository.delete_by_user_and_comment(
                    user_id, comment_id
                )
                liked = False
            else:
                like = CommentLike(
                    id=CommentLikeId(uuid4()),
                    user_id=user_id,
                    comment_id=comment_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.comment_like_repository.save(like)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate comment like attempt",
                        user_id=str(user_id),
                        comment_id=str(comment_id),
                    )
                liked = True

            counts = await self.comment_like_repository.count_by_comments([comment_id])
            like_count = counts.get(comment_id, 0)
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                user_id=str(user_id),
                liked=liked,
                like_count=like_count,
            )
            return LikeState(liked=liked, like_count=like_count)

    async def get_comment_like_state(
        self, comment_id: CommentId, user_id: UserId | None = None
    ) -> LikeState:
        """Get a comment's like count and whether the user likes it."""
        counts = await self.comment_like_repository.count_by_comments([comment_id])
        liked = False
        if user_id is not None:
            liked = (
                await self.comment_like_repository.find_by_user_and_comment(
                    user_id, comment_id
                )
            ) is not None
        return LikeState(liked=liked, like_count=counts.get(comment_id, 0))

    async def get_post_like_counts(self, post_ids: list[PostId]) -> dict[PostId, int]:
        """Count likes for several posts in one query."""
        if not post_ids:
            return {}
        return await self.like_repository.count_by_posts(post_ids)
