"""Comment use cases."""

from .common import CommentAuthorItem, CommentItem, CommentResponse
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    Pagination,
)
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentAuthorItem",
    "CommentItem",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "Pagination",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
