"""Get artbook like status use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.domain.service import ArtbookService, LikeService
from artbook.domain.value import UserId


class GetArtbookLikeStatusRequest(BaseModel):
    """Get artbook like status request."""

    slug: str
    viewer_id: str | None = None


class LikeStatusResponse(ApiModel):
    """Read-only like state used to hydrate a page."""

    user_liked: bool
    like_count: int


class GetArtbookLikeStatusUseCase(BaseUseCase):
    """Use case for reading an artbook's like count and the viewer's like."""

    def __init__(
        self, artbook_service: ArtbookService, like_service: LikeService
    ) -> None:
        self.artbook_service = artbook_service
        self.like_service = like_service

    async def execute(
        self, request: GetArtbookLikeStatusRequest
    ) -> LikeStatusResponse:
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, viewer_id)

        state = await self.like_service.get_post_like_state(post.id, viewer_id)
        return LikeStatusResponse(user_liked=state.liked, like_count=state.like_count)
