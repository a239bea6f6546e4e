"""Mock persistence providers for testing."""

from dishka import Scope, provide

from artbook.domain.repository import (
    ArtbookRepository,
    CommentLikeRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from artbook.persistence.repository.inmemory import (
    InMemoryArtbookRepository,
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from artbook.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    One store lives for the whole container, so data written in one request
    is visible to the next (the e2e client makes many requests). Each test
    builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_artbook_repository(self, store: InMemoryStore) -> ArtbookRepository:
        """Provide in-memory artbook repository."""
        return InMemoryArtbookRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, store: InMemoryStore
    ) -> CommentLikeRepository:
        """Provide in-memory comment like repository."""
        return InMemoryCommentLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, store: InMemoryStore) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository(store)
