"""Like use cases."""

from .get_artbook_like_status import (
    GetArtbookLikeStatusRequest,
    GetArtbookLikeStatusUseCase,
    LikeStatusResponse,
)
from .get_comment_like_status import (
    GetCommentLikeStatusRequest,
    GetCommentLikeStatusUseCase,
)
from .toggle_artbook_like import (
    ToggleArtbookLikeRequest,
    ToggleArtbookLikeUseCase,
    ToggleLikeResponse,
)
from .toggle_comment_like import ToggleCommentLikeRequest, ToggleCommentLikeUseCase

__all__ = [
    "GetArtbookLikeStatusRequest",
    "GetArtbookLikeStatusUseCase",
    "GetCommentLikeStatusRequest",
    "GetCommentLikeStatusUseCase",
    "LikeStatusResponse",
    "ToggleArtbookLikeRequest",
    "ToggleArtbookLikeUseCase",
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeUseCase",
    "ToggleLikeResponse",
]
