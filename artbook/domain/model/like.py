"""Like entities.

A like exists or it does not: there is no "unliked" state on the row.
Business rules:
- One like per user per post, one per user per comment
  (enforced by database unique constraints)
- Counts are always aggregated from rows, never stored
"""

from datetime import datetime

from pydantic import Field

from artbook.domain.model.common import DomainModel
from artbook.domain.value import CommentId, CommentLikeId, LikeId, PostId, UserId


class Like(DomainModel):
    """A user's like on an artbook's post."""

    id: LikeId
    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)


class CommentLike(DomainModel):
    """A user's like on a comment."""

    id: CommentLikeId
    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)
