"""Artbook aggregate root.

An artbook is an illustrated story: a title, a cover, a genre and an
ordered list of pages. Engagement (likes, comments, views) hangs off the
artbook's companion Post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from artbook.domain.model.common import DomainModel
from artbook.domain.value import ArtbookId, Category, PageId, Slug, UserId

MAX_PAGES = 10


class Page(DomainModel):
    """A single page of an artbook."""

    id: PageId
    artbook_id: ArtbookId
    page_number: int = Field(ge=1, le=MAX_PAGES)
    content: str = Field(min_length=1)
    picture_url: Optional[str] = None
    audio_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Artbook(DomainModel):
    """Artbook aggregate root.

    Business rules:
    - 1 to 10 pages, each with a distinct page number
    - Slug is unique across all artbooks (enforced by the database)
    """

    id: ArtbookId
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    description: Optional[str] = None
    cover_photo: Optional[str] = None
    category: Category
    author_id: UserId
    is_public: bool = True
    pages: list[Page] = Field(default_factory=list, max_length=MAX_PAGES)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_page_numbers(self) -> "Artbook":
        """Page numbers must not repeat."""
        numbers = [page.page_number for page in self.pages]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Page numbers must be unique")
        return self
