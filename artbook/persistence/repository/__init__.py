"""PostgreSQL repository implementations."""

from artbook.persistence.repository.artbook import PostgresArtbookRepository
from artbook.persistence.repository.comment import PostgresCommentRepository
from artbook.persistence.repository.like import (
    PostgresCommentLikeRepository,
    PostgresLikeRepository,
)
from artbook.persistence.repository.post import PostgresPostRepository
from artbook.persistence.repository.report import PostgresReportRepository
from artbook.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArtbookRepository",
    "PostgresCommentLikeRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresPostRepository",
    "PostgresReportRepository",
    "PostgresUserRepository",
]
