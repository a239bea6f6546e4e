"""Delete artbook use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.domain.error import NotFoundError
from artbook.domain.service import ArtbookService
from artbook.domain.value import UserId


class DeleteArtbookRequest(BaseModel):
    """Delete artbook request."""

    slug: str
    user_id: str


class DeleteArtbookResponse(ApiModel):
    """Delete artbook response."""

    success: bool
    message: str


class DeleteArtbookUseCase(BaseUseCase):
    """Use case for deleting an artbook with all of its engagement."""

    def __init__(self, artbook_service: ArtbookService) -> None:
        self.artbook_service = artbook_service

    async def execute(self, request: DeleteArtbookRequest) -> DeleteArtbookResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the artbook does not exist
            NotAuthorizedError: If the user is not the author
        """
        artbook = await self.artbook_service.get_artbook_by_slug(request.slug)
        if artbook is None:
            raise NotFoundError("Artbook", request.slug)

        await self.artbook_service.delete_artbook(artbook, UserId(UUID(request.user_id)))
        return DeleteArtbookResponse(
            success=True, message="Artbook deleted successfully"
        )
