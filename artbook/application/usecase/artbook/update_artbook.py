"""Update artbook use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.artbook.common import ArtbookItem, ArtbookResponse
from artbook.application.usecase.base import BaseUseCase
from artbook.domain.service import ArtbookService, UserService
from artbook.domain.value import UserId


class UpdateArtbookRequest(BaseModel):
    """Update artbook request.

    ``changes`` holds only the fields the client sent.
    """

    slug: str
    user_id: str
    changes: dict[str, Any]


class UpdateArtbookUseCase(BaseUseCase):
    """Use case for editing an artbook's metadata."""

    def __init__(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> None:
        self.artbook_service = artbook_service
        self.user_service = user_service

    async def execute(self, request: UpdateArtbookRequest) -> ArtbookResponse:
        """Execute update flow.

        Raises:
            NotFoundError: If the artbook does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If a changed field is invalid
        """
        user_id = UserId(UUID(request.user_id))
        artbook, _ = await self.artbook_service.require_artbook_with_post(request.slug)

        changes = dict(request.changes)
        if isinstance(changes.get("category"), str):
            changes["category"] = changes["category"].upper()

        updated = await self.artbook_service.update_artbook(artbook, user_id, changes)
        stats = (await self.artbook_service.get_stats([updated]))[updated.id]
        author = await self.user_service.get_user_by_id(updated.author_id)
        return ArtbookResponse(
            artbook=ArtbookItem.from_artbook(
                updated, stats=stats, author=author, include_pages=True
            )
        )
