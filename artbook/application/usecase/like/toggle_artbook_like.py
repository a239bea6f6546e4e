"""Toggle artbook like use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.domain.service import ArtbookService, LikeService
from artbook.domain.value import UserId


class ToggleArtbookLikeRequest(BaseModel):
    """Toggle artbook like request."""

    slug: str
    user_id: str


class ToggleLikeResponse(ApiModel):
    """Like state after a toggle."""

    liked: bool
    like_count: int
    message: str


class ToggleArtbookLikeUseCase(BaseUseCase):
    """Use case for liking or unliking an artbook."""

    def __init__(
        self, artbook_service: ArtbookService, like_service: LikeService
    ) -> None:
        self.artbook_service = artbook_service
        self.like_service = like_service

    async def execute(self, request: ToggleArtbookLikeRequest) -> ToggleLikeResponse:
        """Execute toggle flow.

        The caller never needs to know the previous state: the response
        says whether the artbook is liked now and how many users like it.

        Raises:
            NotFoundError: If the artbook does not exist or is hidden
        """
        user_id = UserId(UUID(request.user_id))
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, user_id)

        state = await self.like_service.toggle_post_like(post.id, user_id)
        return ToggleLikeResponse(
            liked=state.liked,
            like_count=state.like_count,
            message=(
                "Post liked successfully" if state.liked else "Post unliked successfully"
            ),
        )
