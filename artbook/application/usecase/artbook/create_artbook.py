"""Create artbook use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.artbook.common import (
    ArtbookItem,
    ArtbookResponse,
    PageInput,
)
from artbook.application.usecase.base import BaseUseCase
from artbook.domain.service import ArtbookService, PageDraft, UserService
from artbook.domain.value import UserId


class CreateArtbookRequest(BaseModel):
    """Create artbook request."""

    author_id: str  # User ID from authenticated user
    title: str
    category: str
    pages: list[PageInput]
    description: str | None = None
    cover_photo: str | None = None
    is_public: bool = True


class CreateArtbookUseCase(BaseUseCase):
    """Use case for publishing a new artbook."""

    def __init__(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> None:
        """Initialize create artbook use case.

        Args:
            artbook_service: Artbook domain service
            user_service: User domain service (author details)
        """
        self.artbook_service = artbook_service
        self.user_service = user_service

    async def execute(self, request: CreateArtbookRequest) -> ArtbookResponse:
        """Execute create artbook flow.

        The artbook, its pages and its engagement post are written in the
        request transaction; a failure leaves none of them behind.

        Raises:
            ValidationError: If the title, category or pages are invalid
        """
        author_id = UserId(UUID(request.author_id))
        artbook, _ = await self.artbook_service.create_artbook(
            author_id=author_id,
            title=request.title,
            category=request.category.upper(),
            pages=[PageDraft(**page.model_dump()) for page in request.pages],
            description=request.description,
            cover_photo=request.cover_photo,
            is_public=request.is_public,
        )
        author = await self.user_service.get_user_by_id(author_id)
        return ArtbookResponse(
            artbook=ArtbookItem.from_artbook(artbook, author=author, include_pages=True)
        )
