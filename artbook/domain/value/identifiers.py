"""Strongly typed identifiers for Artbook domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ArtbookId = NewType("ArtbookId", UUID)
PageId = NewType("PageId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
CommentLikeId = NewType("CommentLikeId", UUID)
ReportId = NewType("ReportId", UUID)
