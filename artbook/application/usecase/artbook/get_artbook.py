"""Get artbook use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.artbook.common import ArtbookItem, ArtbookResponse
from artbook.application.usecase.base import BaseUseCase
from artbook.domain.service import ArtbookService, UserService
from artbook.domain.value import UserId


class GetArtbookRequest(BaseModel):
    """Get artbook request."""

    slug: str
    viewer_id: str | None = None


class GetArtbookUseCase(BaseUseCase):
    """Use case for opening an artbook's detail page.

    Opening the page counts as a view.
    """

    def __init__(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> None:
        self.artbook_service = artbook_service
        self.user_service = user_service

    async def execute(self, request: GetArtbookRequest) -> ArtbookResponse:
        """Execute get artbook flow.

        Raises:
            NotFoundError: If the artbook does not exist, or is private and
                the viewer is not its author
        """
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, viewer_id)

        views = await self.artbook_service.record_view(post)
        stats = (await self.artbook_service.get_stats([artbook]))[artbook.id]
        author = await self.user_service.get_user_by_id(artbook.author_id)

        return ArtbookResponse(
            artbook=ArtbookItem.from_artbook(
                artbook,
                stats=stats.model_copy(update={"views": views}),
                author=author,
                include_pages=True,
            )
        )
