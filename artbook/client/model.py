"""Client-side comment tree state.

Unlike the frozen domain models these are mutable: the controller edits
them in place while requests are in flight.
"""

from datetime import datetime
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from artbook.application.usecase.comment import CommentAuthorItem, CommentItem

TEMP_ID_PREFIX = "temp-"


def new_temp_id() -> str:
    """Placeholder id for a comment the server has not confirmed yet."""
    return f"{TEMP_ID_PREFIX}{uuid4()}"


class CommentNode(BaseModel):
    """A comment as held in the client tree."""

    id: str
    post_id: str | None = None
    parent_id: str | None = None
    content: str
    author: CommentAuthorItem
    created_at: datetime
    updated_at: datetime
    reply_count: int = 0
    like_count: int = 0
    viewer_liked: bool = False
    replies: list["CommentNode"] = Field(default_factory=list)
    pending: bool = False

    @classmethod
    def from_item(cls, item: CommentItem) -> "CommentNode":
        return cls(
            id=item.id,
            post_id=item.post_id,
            parent_id=item.parent_id,
            content=item.content,
            author=item.author,
            created_at=item.created_at,
            updated_at=item.updated_at,
            reply_count=item.reply_count,
            like_count=item.like_count,
            viewer_liked=item.viewer_liked,
            replies=[cls.from_item(reply) for reply in item.replies],
        )

    def apply_server(self, item: CommentItem) -> None:
        """Take the server's fields. Loaded replies are kept."""
        self.id = item.id
        self.post_id = item.post_id
        self.parent_id = item.parent_id
        self.content = item.content
        self.author = item.author
        self.created_at = item.created_at
        self.updated_at = item.updated_at
        self.reply_count = item.reply_count
        self.like_count = item.like_count
        self.viewer_liked = item.viewer_liked
        self.pending = False


class CommentTreeState(BaseModel):
    """Everything the comment section renders from."""

    comments: list[CommentNode] = Field(default_factory=list)
    page: int = 0
    limit: int = 10
    total_top_level: int = 0
    has_more: bool = False
    loading: bool = False

    @property
    def total_comments(self) -> int:
        """Top-level comments plus their replies, derived from the tree."""
        return sum(1 + node.reply_count for node in self.comments)


MutationKind = Literal["submit", "like", "edit", "delete"]


class PendingMutation(BaseModel):
    """An optimistic change waiting for the server.

    ``snapshot`` holds what is needed to undo the change.
    """

    correlation_id: str = Field(default_factory=lambda: uuid4().hex)
    kind: MutationKind
    node_id: str
    parent_id: str | None = None
    snapshot: dict[str, Any] = Field(default_factory=dict)
