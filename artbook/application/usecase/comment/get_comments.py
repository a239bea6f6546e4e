"""Get comments use case.

Assembles one page of the comment tree. Nesting is capped, so a page is a
fixed two-level structure: top-level comments (newest first) each carrying
their direct replies (oldest first). Everything below is fetched with a
constant number of batched queries per page.
"""

import math
from uuid import UUID

import logfire
from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.application.usecase.comment.common import CommentItem
from artbook.config import CommentSettings
from artbook.domain.service import ArtbookService, CommentService
from artbook.domain.value import UserId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    slug: str
    page: int = 1
    limit: int | None = None  # Falls back to the configured default
    viewer_id: str | None = None  # Set when the reader is authenticated


class Pagination(ApiModel):
    """Pagination metadata for top-level comments."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class GetCommentsResponse(ApiModel):
    """Get comments response."""

    comments: list[CommentItem]
    pagination: Pagination


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading one page of an artbook's comments."""

    def __init__(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    def clamp(self, page: int, limit: int | None) -> tuple[int, int]:
        """Clamp page to >= 1 and limit to 1..max_page_size."""
        if limit is None:
            limit = self.comment_settings.default_page_size
        limit = max(1, min(limit, self.comment_settings.max_page_size))
        return max(1, page), limit

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the artbook does not exist or is hidden
        """
        page, limit = self.clamp(request.page, request.limit)
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        with logfire.span(
            "get_comments", slug=request.slug, page=page, limit=limit
        ):
            artbook, post = await self.artbook_service.require_artbook_with_post(
                request.slug
            )
            self.artbook_service.ensure_visible(artbook, viewer_id)

            top_level, total = await self.comment_service.list_top_level(
                post.id, limit=limit, offset=(page - 1) * limit
            )
            replies = await self.comment_service.list_replies([c.id for c in top_level])

            # One annotation pass covers both levels
            annotated = await self.comment_service.annotate(
                [*top_level, *replies], viewer_id=viewer_id
            )
            top_annotated = annotated[: len(top_level)]
            reply_annotated = annotated[len(top_level) :]

            replies_by_parent: dict[str, list[CommentItem]] = {}
            for reply in reply_annotated:
                replies_by_parent.setdefault(str(reply.comment.parent_id), []).append(
                    CommentItem.from_annotated(reply)
                )

            comments = [
                CommentItem.from_annotated(
                    item, replies=replies_by_parent.get(str(item.comment.id), [])
                )
                for item in top_annotated
            ]

            total_pages = math.ceil(total / limit) if total else 0
            logfire.info(
                "Comment page assembled",
                slug=request.slug,
                top_level=len(comments),
                replies=len(reply_annotated),
                total=total,
            )
            return GetCommentsResponse(
                comments=comments,
                pagination=Pagination(
                    page=page,
                    limit=limit,
                    total=total,
                    total_pages=total_pages,
                    has_next=page < total_pages,
                    has_prev=page > 1,
                ),
            )
