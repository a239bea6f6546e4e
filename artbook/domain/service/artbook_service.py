"""Artbook domain service."""

import re
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from artbook.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from artbook.domain.model.artbook import MAX_PAGES, Artbook, Page
from artbook.domain.model.common import DomainModel
from artbook.domain.model.post import Post
from artbook.domain.repository import (
    ArtbookRepository,
    CommentLikeRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
)
from artbook.domain.value import ArtbookId, Category, PageId, PostId, Slug, UserId

from .base import Service

MAX_SLUG_LENGTH = 100

# Fields an author may change after creation; pages are fixed once published
UPDATABLE_FIELDS = frozenset(
    {"title", "description", "cover_photo", "category", "is_public"}
)


class PageDraft(DomainModel):
    """Page content supplied when creating an artbook."""

    page_number: int
    content: str
    picture_url: Optional[str] = None
    audio_url: Optional[str] = None


class ArtbookStats(DomainModel):
    """Engagement numbers shown next to an artbook."""

    likes: int = 0
    comments: int = 0
    views: int = 0


def _first_error(exc: PydanticValidationError) -> str:
    """Turn a pydantic error into a single human-readable message."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


class ArtbookService(Service):
    """Domain service for artbooks and their engagement post."""

    def __init__(
        self,
        artbook_repository: ArtbookRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        comment_like_repository: CommentLikeRepository,
        report_repository: ReportRepository,
    ) -> None:
        """Initialize artbook service.

        The engagement repositories are needed for cascading deletes and
        for the stats shown on listings.
        """
        self.artbook_repository = artbook_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.comment_like_repository = comment_like_repository
        self.report_repository = report_repository

    async def get_artbook_by_slug(self, slug: str) -> Artbook | None:
        """Get an artbook by slug.

        Malformed slugs cannot match anything and return None.
        """
        with logfire.span("artbook_service.get_artbook_by_slug", slug=slug):
            try:
                parsed = Slug(slug)
            except PydanticValidationError:
                logfire.warn("Malformed artbook slug", slug=slug)
                return None

            artbook = await self.artbook_repository.find_by_slug(parsed)
            if artbook:
                logfire.info(
                    "Artbook found by slug", slug=slug, artbook_id=str(artbook.id)
                )
            else:
                logfire.warn("Artbook not found by slug", slug=slug)
            return artbook

    async def require_artbook_with_post(self, slug: str) -> tuple[Artbook, Post]:
        """Resolve a slug to its artbook and engagement post.

        Raises:
            NotFoundError: If the artbook (or its post) does not exist
        """
        artbook = await self.get_artbook_by_slug(slug)
        if artbook is None:
            raise NotFoundError("Artbook", slug)
        post = await self.post_repository.find_by_artbook(artbook.id)
        if post is None:
            logfire.error("Artbook has no post", artbook_id=str(artbook.id))
            raise NotFoundError("Post", slug)
        return artbook, post

    @staticmethod
    def ensure_visible(artbook: Artbook, viewer_id: UserId | None) -> None:
        """Private artbooks exist only for their author.

        Raises:
            NotFoundError: If the viewer may not see the artbook
        """
        if not artbook.is_public and artbook.author_id != viewer_id:
            raise NotFoundError("Artbook", str(artbook.slug))

    @staticmethod
    def ensure_owner(artbook: Artbook, requester_id: UserId, action: str) -> None:
        """Raises NotAuthorizedError unless the requester wrote the artbook."""
        if artbook.author_id != requester_id:
            logfire.warn(
                "Unauthorized artbook access",
                artbook_id=str(artbook.id),
                requester_id=str(requester_id),
                action=action,
            )
            raise NotAuthorizedError(
                "artbook", str(artbook.id), str(requester_id), action=action
            )

    async def create_artbook(
        self,
        author_id: UserId,
        title: str,
        category: Category | str,
        pages: list[PageDraft],
        description: str | None = None,
        cover_photo: str | None = None,
        is_public: bool = True,
    ) -> tuple[Artbook, Post]:
        """Create an artbook with its pages and its engagement post.

        All rows are written through the request session, so they commit
        or roll back together.

        Raises:
            ValidationError: If the title, category or pages are invalid
        """
        with logfire.span(
            "artbook_service.create_artbook",
            author_id=str(author_id),
            title=title,
            page_count=len(pages),
        ):
            if not pages:
                raise ValidationError("At least one page is required")
            if len(pages) > MAX_PAGES:
                raise ValidationError(f"Maximum {MAX_PAGES} pages allowed")

            artbook_id = ArtbookId(uuid4())
            now = datetime.now()
            try:
                built_pages = [
                    Page(
                        id=PageId(uuid4()),
                        artbook_id=artbook_id,
                        page_number=draft.page_number,
                        content=draft.content,
                        picture_url=draft.picture_url,
                        audio_url=draft.audio_url,
                        created_at=now,
                    )
                    for draft in sorted(pages, key=lambda p: p.page_number)
                ]
                # Validate title/category before spending queries on the slug
                Artbook.model_validate(
                    {
                        "id": artbook_id,
                        "title": title,
                        "slug": Slug("placeholder"),
                        "category": category,
                        "author_id": author_id,
                        "pages": built_pages,
                    }
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid artbook data", error=_first_error(e))
                raise ValidationError(_first_error(e)) from e

            slug = await self.generate_unique_slug(title, artbook_id)
            artbook = Artbook(
                id=artbook_id,
                title=title,
                slug=slug,
                description=description,
                cover_photo=cover_photo,
                category=Category(category),
                author_id=author_id,
                is_public=is_public,
                pages=built_pages,
                created_at=now,
                updated_at=now,
            )
            saved = await self.artbook_repository.save(artbook)

            post = Post(
                id=PostId(uuid4()), artbook_id=saved.id, views=0, created_at=now
            )
            saved_post = await self.post_repository.save(post)

            logfire.info(
                "Artbook created",
                artbook_id=str(saved.id),
                slug=str(saved.slug),
                post_id=str(saved_post.id),
            )
            return saved, saved_post

    async def update_artbook(
        self, artbook: Artbook, requester_id: UserId, changes: dict[str, Any]
    ) -> Artbook:
        """Apply metadata changes to an artbook. Only the author may update.

        A changed title produces a new unique slug; the artbook's own
        current slug does not count as a collision.

        Raises:
            NotAuthorizedError: If the requester is not the author
            ValidationError: If a changed field is invalid
        """
        with logfire.span(
            "artbook_service.update_artbook",
            artbook_id=str(artbook.id),
            requester_id=str(requester_id),
            fields=sorted(changes),
        ):
            self.ensure_owner(artbook, requester_id, action="edit")

            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be updated: {sorted(unknown)}")

            update = dict(changes)
            if "title" in update and update["title"] != artbook.title:
                update["slug"] = await self.generate_unique_slug(
                    update["title"], artbook.id, exclude_id=artbook.id
                )
            update["updated_at"] = datetime.now()

            try:
                updated = Artbook.model_validate(
                    {**artbook.model_dump(), **update}
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid artbook update", error=_first_error(e))
                raise ValidationError(_first_error(e)) from e

            saved = await self.artbook_repository.save(updated)
            logfire.info(
                "Artbook updated",
                artbook_id=str(saved.id),
                slug=str(saved.slug),
                slug_changed=saved.slug != artbook.slug,
            )
            return saved

    async def delete_artbook(self, artbook: Artbook, requester_id: UserId) -> None:
        """Delete an artbook and everything hanging off it.

        Order: comment likes, post likes, comments, post, reports, then the
        artbook with its pages. Runs inside the request transaction.

        Raises:
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "artbook_service.delete_artbook",
            artbook_id=str(artbook.id),
            requester_id=str(requester_id),
        ):
            self.ensure_owner(artbook, requester_id, action="delete")

            post = await self.post_repository.find_by_artbook(artbook.id)
            if post is not None:
                comment_ids = await self.comment_repository.find_ids_by_post(post.id)
                comment_likes = await self.comment_like_repository.delete_by_comments(
                    comment_ids
                )
                likes = await self.like_repository.delete_by_post(post.id)
                comments = await self.comment_repository.delete_by_post(post.id)
                await self.post_repository.delete(post.id)
                logfire.info(
                    "Artbook engagement deleted",
                    artbook_id=str(artbook.id),
                    comment_likes=comment_likes,
                    likes=likes,
                    comments=comments,
                )

            await self.report_repository.delete_by_artbook(artbook.id)
            await self.artbook_repository.delete(artbook.id)
            logfire.info("Artbook deleted", artbook_id=str(artbook.id))

    async def record_view(self, post: Post) -> int:
        """Increment the view counter and return the new value.

        Raises:
            NotFoundError: If the post vanished in the meantime
        """
        with logfire.span("artbook_service.record_view", post_id=str(post.id)):
            views = await self.post_repository.increment_views(post.id)
            if views is None:
                raise NotFoundError("Post", str(post.id))
            logfire.info("View recorded", post_id=str(post.id), views=views)
            return views

    async def list_artbooks(
        self,
        category: Category | None = None,
        author_id: UserId | None = None,
        is_public: bool | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Artbook]:
        """List artbooks newest first."""
        with logfire.span(
            "artbook_service.list_artbooks",
            category=category.value if category else None,
            author_id=str(author_id) if author_id else None,
            is_public=is_public,
        ):
            artbooks = await self.artbook_repository.find_all(
                category=category,
                author_id=author_id,
                is_public=is_public,
                limit=limit,
                offset=offset,
            )
            logfire.info("Artbooks listed", count=len(artbooks))
            return artbooks

    async def get_stats(
        self, artbooks: list[Artbook]
    ) -> dict[ArtbookId, ArtbookStats]:
        """Engagement stats for several artbooks with batched queries."""
        if not artbooks:
            return {}

        posts = await self.post_repository.find_by_artbooks([a.id for a in artbooks])
        post_ids = [post.id for post in posts.values()]
        like_counts = await self.like_repository.count_by_posts(post_ids)
        comment_counts = await self.comment_repository.count_by_posts(post_ids)

        stats = {}
        for artbook in artbooks:
            post = posts.get(artbook.id)
            if post is None:
                stats[artbook.id] = ArtbookStats()
                continue
            stats[artbook.id] = ArtbookStats(
                likes=like_counts.get(post.id, 0),
                comments=comment_counts.get(post.id, 0),
                views=post.views,
            )
        return stats

    async def generate_unique_slug(
        self,
        title: str,
        artbook_id: ArtbookId,
        exclude_id: ArtbookId | None = None,
    ) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes (-1, -2, ...).

        Args:
            title: Artbook title to slugify
            artbook_id: Artbook ID (used for fallback if title produces empty slug)
            exclude_id: Artbook whose current slug should not count as taken

        Returns:
            Unique slug for the artbook
        """
        with logfire.span(
            "artbook_service.generate_unique_slug",
            artbook_id=str(artbook_id),
            title=title,
        ):
            base_slug_str = self._slugify(title)

            if not base_slug_str:
                fallback = f"artbook-{artbook_id.hex[:8]}"
                logfire.info(
                    "Using fallback slug for empty title",
                    artbook_id=str(artbook_id),
                    slug=fallback,
                )
                return Slug(fallback)

            slug_str = base_slug_str
            counter = 1
            while await self.artbook_repository.slug_exists(
                Slug(slug_str), exclude_id=exclude_id
            ):
                suffix = f"-{counter}"
                slug_str = base_slug_str[: MAX_SLUG_LENGTH - len(suffix)].rstrip("-")
                slug_str += suffix
                counter += 1
                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug_str,
                    attempt=slug_str,
                )

            slug = Slug(slug_str)
            logfire.info(
                "Generated unique slug",
                artbook_id=str(artbook_id),
                slug=str(slug),
                had_collision=counter > 1,
            )
            return slug

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        - Converts to lowercase
        - Drops everything except letters, digits, whitespace and hyphens
        - Replaces whitespace runs with a hyphen
        - Collapses consecutive hyphens and strips them from the ends
        - Truncates to 100 characters

        Args:
            title: Title to slugify

        Returns:
            URL-safe slug string (may be empty if title has no valid chars)
        """
        slug = re.sub(r"[^a-z0-9\s-]", "", title.lower())
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")[:MAX_SLUG_LENGTH].strip("-")
