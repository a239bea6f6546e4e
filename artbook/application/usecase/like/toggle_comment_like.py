"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import BaseUseCase, parse_id
from artbook.application.usecase.like.toggle_artbook_like import ToggleLikeResponse
from artbook.domain.service import ArtbookService, CommentService, LikeService
from artbook.domain.value import CommentId, UserId


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    slug: str
    comment_id: str
    user_id: str


class ToggleCommentLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: ToggleCommentLikeRequest) -> ToggleLikeResponse:
        """Execute toggle flow.

        The comment must sit on the addressed artbook; a comment from
        another artbook is a conflict, never a silent success.

        Raises:
            NotFoundError: If the artbook or comment does not exist
            ConflictError: If the comment belongs to another artbook
        """
        user_id = UserId(UUID(request.user_id))
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, user_id)

        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        await self.comment_service.get_comment_on_post(comment_id, post.id)

        state = await self.like_service.toggle_comment_like(comment_id, user_id)
        return ToggleLikeResponse(
            liked=state.liked,
            like_count=state.like_count,
            message="Comment liked" if state.liked else "Comment unliked",
        )
