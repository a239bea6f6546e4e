"""Shared state for the in-memory repositories.

Repositories are request-scoped, but tests that span several requests
(e.g. through the HTTP client) need the data to survive between them.
One store is shared by all in-memory repositories of a container.
"""

from artbook.domain.model import (
    Artbook,
    Comment,
    CommentLike,
    Like,
    Post,
    Report,
    User,
)
from artbook.domain.value import ArtbookId, CommentId, PostId, UserId


class InMemoryStore:
    """Plain containers standing in for database tables."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.artbooks: dict[ArtbookId, Artbook] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.likes: list[Like] = []
        self.comment_likes: list[CommentLike] = []
        self.reports: list[Report] = []
