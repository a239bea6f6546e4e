"""Client for the artbook comment API."""

from .client import CommentApiClient, HttpCommentApiClient

__all__ = ["CommentApiClient", "HttpCommentApiClient"]
