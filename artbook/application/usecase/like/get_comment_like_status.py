"""Get comment like status use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import BaseUseCase, parse_id
from artbook.application.usecase.like.get_artbook_like_status import (
    LikeStatusResponse,
)
from artbook.domain.service import ArtbookService, CommentService, LikeService
from artbook.domain.value import CommentId, UserId


class GetCommentLikeStatusRequest(BaseModel):
    """Get comment like status request."""

    slug: str
    comment_id: str
    viewer_id: str | None = None


class GetCommentLikeStatusUseCase(BaseUseCase):
    """Use case for reading a comment's like count and the viewer's like."""

    def __init__(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(
        self, request: GetCommentLikeStatusRequest
    ) -> LikeStatusResponse:
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, viewer_id)

        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        await self.comment_service.get_comment_on_post(comment_id, post.id)

        state = await self.like_service.get_comment_like_state(comment_id, viewer_id)
        return LikeStatusResponse(user_liked=state.liked, like_count=state.like_count)
