"""Domain services."""

from .artbook_service import ArtbookService, ArtbookStats, PageDraft
from .base import Service
from .comment_service import AnnotatedComment, CommentAuthor, CommentService
from .jwt_service import JWTService
from .like_service import LikeService, LikeState
from .report_service import ReportService
from .sanitizer import sanitize, sanitize_comment_content
from .user_service import UserService

__all__ = [
    "AnnotatedComment",
    "ArtbookService",
    "ArtbookStats",
    "CommentAuthor",
    "CommentService",
    "JWTService",
    "LikeService",
    "LikeState",
    "PageDraft",
    "ReportService",
    "Service",
    "UserService",
    "sanitize",
    "sanitize_comment_content",
]
