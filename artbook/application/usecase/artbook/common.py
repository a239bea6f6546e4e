"""Artbook response items shared by the artbook use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from artbook.application.usecase.base import ApiModel
from artbook.domain.model import Artbook, User
from artbook.domain.service import ArtbookStats


class PageInput(BaseModel):
    """Page content supplied by the author."""

    page_number: int
    content: str
    picture_url: str | None = None
    audio_url: str | None = None


class PageItem(ApiModel):
    """A page of an artbook."""

    id: str
    page_number: int
    content: str
    picture_url: str | None
    audio_url: str | None


class ArtbookAuthorItem(ApiModel):
    """Public author details."""

    id: str
    name: str
    image: str | None = None


class StatsItem(ApiModel):
    """Engagement numbers."""

    likes: int = 0
    comments: int = 0
    views: int = 0


class ArtbookItem(ApiModel):
    """An artbook as returned to clients.

    Listings leave ``pages`` empty; detail responses include them.
    """

    id: str
    title: str
    slug: str
    description: str | None
    cover_photo: str | None
    category: str
    is_public: bool
    author_id: str
    author: ArtbookAuthorItem | None = None
    created_at: datetime
    updated_at: datetime
    stats: StatsItem = Field(default_factory=StatsItem)
    pages: list[PageItem] = Field(default_factory=list)

    @classmethod
    def from_artbook(
        cls,
        artbook: Artbook,
        stats: ArtbookStats | None = None,
        author: User | None = None,
        include_pages: bool = False,
    ) -> "ArtbookItem":
        stats = stats or ArtbookStats()
        return cls(
            id=str(artbook.id),
            title=artbook.title,
            slug=str(artbook.slug),
            description=artbook.description,
            cover_photo=artbook.cover_photo,
            category=artbook.category.value,
            is_public=artbook.is_public,
            author_id=str(artbook.author_id),
            author=(
                ArtbookAuthorItem(id=str(author.id), name=author.name, image=author.image)
                if author
                else None
            ),
            created_at=artbook.created_at,
            updated_at=artbook.updated_at,
            stats=StatsItem(
                likes=stats.likes, comments=stats.comments, views=stats.views
            ),
            pages=(
                [
                    PageItem(
                        id=str(page.id),
                        page_number=page.page_number,
                        content=page.content,
                        picture_url=page.picture_url,
                        audio_url=page.audio_url,
                    )
                    for page in artbook.pages
                ]
                if include_pages
                else []
            ),
        )


class ArtbookResponse(ApiModel):
    """Single artbook wrapped as ``{"artbook": ...}``."""

    artbook: ArtbookItem
