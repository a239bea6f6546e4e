"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase, parse_id
from artbook.application.usecase.comment.common import CommentItem
from artbook.domain.service import ArtbookService, CommentService
from artbook.domain.value import CommentId, UserId


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    slug: str
    comment_id: str
    viewer_id: str | None = None


class GetRepliesResponse(ApiModel):
    """Direct replies of one comment, oldest first."""

    comments: list[CommentItem]


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing the direct replies of any comment.

    Tree pages stop at the replies of top-level comments; deeper replies
    are loaded through here.
    """

    def __init__(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> None:
        self.artbook_service = artbook_service
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        artbook, post = await self.artbook_service.require_artbook_with_post(
            request.slug
        )
        self.artbook_service.ensure_visible(artbook, viewer_id)

        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        await self.comment_service.get_comment_on_post(comment_id, post.id)

        replies = await self.comment_service.list_replies([comment_id])
        annotated = await self.comment_service.annotate(replies, viewer_id=viewer_id)
        return GetRepliesResponse(
            comments=[CommentItem.from_annotated(item) for item in annotated]
        )
