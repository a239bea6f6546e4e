"""Artbook use cases."""

from .common import (
    ArtbookAuthorItem,
    ArtbookItem,
    ArtbookResponse,
    PageInput,
    PageItem,
    StatsItem,
)
from .create_artbook import CreateArtbookRequest, CreateArtbookUseCase
from .delete_artbook import (
    DeleteArtbookRequest,
    DeleteArtbookResponse,
    DeleteArtbookUseCase,
)
from .get_artbook import GetArtbookRequest, GetArtbookUseCase
from .list_artbooks import (
    ListArtbooksRequest,
    ListArtbooksResponse,
    ListArtbooksUseCase,
)
from .record_view import RecordViewRequest, RecordViewResponse, RecordViewUseCase
from .update_artbook import UpdateArtbookRequest, UpdateArtbookUseCase

__all__ = [
    "ArtbookAuthorItem",
    "ArtbookItem",
    "ArtbookResponse",
    "CreateArtbookRequest",
    "CreateArtbookUseCase",
    "DeleteArtbookRequest",
    "DeleteArtbookResponse",
    "DeleteArtbookUseCase",
    "GetArtbookRequest",
    "GetArtbookUseCase",
    "ListArtbooksRequest",
    "ListArtbooksResponse",
    "ListArtbooksUseCase",
    "PageInput",
    "PageItem",
    "RecordViewRequest",
    "RecordViewResponse",
    "RecordViewUseCase",
    "StatsItem",
    "UpdateArtbookRequest",
    "UpdateArtbookUseCase",
]
