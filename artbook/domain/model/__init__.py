"""Domain model entities for Artbook."""

from artbook.domain.model.artbook import Artbook, Page
from artbook.domain.model.comment import Comment
from artbook.domain.model.like import CommentLike, Like
from artbook.domain.model.post import Post
from artbook.domain.model.report import Report
from artbook.domain.model.user import User

__all__ = [
    "User",
    "Artbook",
    "Page",
    "Post",
    "Comment",
    "Like",
    "CommentLike",
    "Report",
]
