"""Record view use case."""

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.domain.service import ArtbookService


class RecordViewRequest(BaseModel):
    """Record view request."""

    slug: str


class RecordViewResponse(ApiModel):
    """View counter after the increment."""

    views: int


class RecordViewUseCase(BaseUseCase):
    """Use case for counting a view without loading the artbook."""

    def __init__(self, artbook_service: ArtbookService) -> None:
        self.artbook_service = artbook_service

    async def execute(self, request: RecordViewRequest) -> RecordViewResponse:
        _, post = await self.artbook_service.require_artbook_with_post(request.slug)
        views = await self.artbook_service.record_view(post)
        return RecordViewResponse(views=views)
