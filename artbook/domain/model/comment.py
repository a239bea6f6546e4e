"""Comment entity.

Comments are threaded discussions on an artbook's post. Nesting is capped:
a top-level comment has depth 0, a reply depth 1, a reply-to-a-reply depth 2.
Depth is never stored; it is derived by walking ``parent_id`` pointers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from artbook.domain.model.common import DomainModel
from artbook.domain.value import CommentId, PostId, UserId

MAX_COMMENT_DEPTH = 2
MAX_COMMENT_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    ``parent_id`` is fixed at creation; edits only touch ``content``.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
