"""Mock providers for testing."""

from .comment_api import FakeCommentApiClient, MockCommentApiProvider
from .persistence import MockPersistenceProvider
from .container import build_test_client_container, build_test_container

__all__ = [
    "FakeCommentApiClient",
    "MockCommentApiProvider",
    "MockPersistenceProvider",
    "build_test_client_container",
    "build_test_container",
]
