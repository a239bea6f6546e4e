"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase, parse_id
from artbook.domain.service import ArtbookService, CommentService
from artbook.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    slug: str
    comment_id: str
    user_id: str


class DeleteCommentResponse(ApiModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment without replies."""

    def __init__(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the artbook or comment does not exist, or the
                artbook is private to someone else
            NotAuthorizedError: If the user is not the author
            ConflictError: If the comment has replies or is on another artbook
        """
        user_id = UserId(UUID(request.user_id))
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, user_id)

        await self.comment_service.delete_comment(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            post_id=post.id,
            requester_id=user_id,
        )
        return DeleteCommentResponse(
            success=True, message="Comment deleted successfully"
        )
