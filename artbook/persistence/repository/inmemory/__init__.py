"""In-memory repository implementations for testing."""

from .artbook import InMemoryArtbookRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryCommentLikeRepository, InMemoryLikeRepository
from .post import InMemoryPostRepository
from .report import InMemoryReportRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArtbookRepository",
    "InMemoryCommentLikeRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
