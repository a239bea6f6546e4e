"""Repository interfaces for Artbook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from artbook.domain.repository.artbook import ArtbookRepository
from artbook.domain.repository.comment import CommentRepository
from artbook.domain.repository.like import CommentLikeRepository, LikeRepository
from artbook.domain.repository.post import PostRepository
from artbook.domain.repository.report import ReportRepository
from artbook.domain.repository.user import UserRepository

__all__ = [
    "ArtbookRepository",
    "CommentLikeRepository",
    "CommentRepository",
    "LikeRepository",
    "PostRepository",
    "ReportRepository",
    "UserRepository",
]
