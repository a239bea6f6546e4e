"""Domain value objects for Artbook."""

from artbook.domain.value.identifiers import (
    ArtbookId,
    CommentId,
    CommentLikeId,
    LikeId,
    PageId,
    PostId,
    ReportId,
    UserId,
)
from artbook.domain.value.types import (
    Category,
    ReportCategory,
    ReportStatus,
    Slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArtbookId",
    "PageId",
    "PostId",
    "CommentId",
    "LikeId",
    "CommentLikeId",
    "ReportId",
    # Types
    "Category",
    "ReportCategory",
    "ReportStatus",
    "Slug",
]
