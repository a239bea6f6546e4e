"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import BaseUseCase, parse_id
from artbook.application.usecase.comment.common import CommentItem, CommentResponse
from artbook.domain.service import ArtbookService, CommentService
from artbook.domain.value import CommentId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    slug: str
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an artbook or replying to a comment."""

    def __init__(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            artbook_service: Artbook domain service (slug resolution)
            comment_service: Comment domain service
        """
        self.artbook_service = artbook_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the artbook and its post from the slug
        2. Create the comment (sanitizes, checks parent and depth)
        3. Return it enriched with author details and zeroed counters

        Raises:
            NotFoundError: If the artbook or parent comment does not exist
            ValidationError: If the content is empty or too long
            ConflictError: If the parent is on another artbook or too deep
        """
        author_id = UserId(UUID(request.author_id))
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, author_id)

        parent_id = (
            CommentId(parse_id(request.parent_id, "Parent comment"))
            if request.parent_id
            else None
        )
        comment = await self.comment_service.create_comment(
            post_id=post.id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        [annotated] = await self.comment_service.annotate([comment], viewer_id=author_id)
        return CommentResponse(comment=CommentItem.from_annotated(annotated))
