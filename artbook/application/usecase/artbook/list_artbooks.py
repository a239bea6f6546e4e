"""List artbooks use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from artbook.application.usecase.artbook.common import ArtbookItem
from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.domain.error import ValidationError
from artbook.domain.service import ArtbookService, UserService
from artbook.domain.value import Category, UserId


class ListArtbooksRequest(BaseModel):
    """List artbooks request."""

    category: str | None = None
    author_id: str | None = None
    viewer_id: str | None = None
    limit: int = 50
    offset: int = 0


class ListArtbooksResponse(ApiModel):
    """List artbooks response."""

    artbooks: list[ArtbookItem]


class ListArtbooksUseCase(BaseUseCase):
    """Use case for discovery listings and author dashboards.

    Private artbooks are only listed for their author, when the author
    asks for their own artbooks.
    """

    def __init__(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> None:
        self.artbook_service = artbook_service
        self.user_service = user_service

    async def execute(self, request: ListArtbooksRequest) -> ListArtbooksResponse:
        """Execute list flow. Stats and authors are fetched in batches.

        Raises:
            ValidationError: If the category or author ID is invalid
        """
        try:
            category = Category(request.category.upper()) if request.category else None
            author_id = UserId(UUID(request.author_id)) if request.author_id else None
        except ValueError as e:
            raise ValidationError(str(e)) from e

        own_dashboard = author_id is not None and request.viewer_id == str(author_id)
        artbooks = await self.artbook_service.list_artbooks(
            category=category,
            author_id=author_id,
            is_public=None if own_dashboard else True,
            limit=max(1, min(request.limit, 100)),
            offset=max(0, request.offset),
        )

        stats = await self.artbook_service.get_stats(artbooks)
        authors = await self.user_service.get_users_by_ids(
            [a.author_id for a in artbooks]
        )
        logfire.info(
            "Artbooks listed with stats",
            count=len(artbooks),
            own_dashboard=own_dashboard,
        )
        return ListArtbooksResponse(
            artbooks=[
                ArtbookItem.from_artbook(
                    a, stats=stats.get(a.id), author=authors.get(a.author_id)
                )
                for a in artbooks
            ]
        )
