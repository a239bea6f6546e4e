"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import BaseUseCase, parse_id
from artbook.application.usecase.comment.common import CommentItem, CommentResponse
from artbook.domain.service import ArtbookService, CommentService
from artbook.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    slug: str
    comment_id: str
    user_id: str  # User ID from authenticated user
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Only the author can edit. The returned comment carries the
        editor's own like state.

        Raises:
            NotFoundError: If the artbook or comment does not exist
            ConflictError: If the comment belongs to another artbook
            NotAuthorizedError: If the user is not the author
            ValidationError: If the new content is empty or too long
        """
        user_id = UserId(UUID(request.user_id))
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, user_id)

        updated = await self.comment_service.update_content(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            post_id=post.id,
            requester_id=user_id,
            content=request.content,
        )

        [annotated] = await self.comment_service.annotate([updated], viewer_id=user_id)
        return CommentResponse(comment=CommentItem.from_annotated(annotated))
