"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import Field

from artbook.application.usecase.base import ApiModel
from artbook.domain.service import AnnotatedComment


class CommentAuthorItem(ApiModel):
    """Author details shown next to a comment."""

    id: str
    name: str
    image: str | None = None


class CommentItem(ApiModel):
    """A comment as returned to clients.

    ``replies`` is only filled for top-level comments of a tree page.
    """

    id: str
    post_id: str
    parent_id: str | None
    content: str
    author: CommentAuthorItem
    created_at: datetime
    updated_at: datetime
    reply_count: int
    like_count: int
    viewer_liked: bool
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_annotated(
        cls, annotated: AnnotatedComment, replies: list["CommentItem"] | None = None
    ) -> "CommentItem":
        comment = annotated.comment
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            author=CommentAuthorItem(
                id=str(annotated.author.id),
                name=annotated.author.name,
                image=annotated.author.image,
            ),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            reply_count=annotated.reply_count,
            like_count=annotated.like_count,
            viewer_liked=annotated.viewer_liked,
            replies=replies or [],
        )


class CommentResponse(ApiModel):
    """Single comment wrapped as ``{"comment": ...}``."""

    comment: CommentItem
