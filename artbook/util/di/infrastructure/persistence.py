"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from artbook.config import Settings
from artbook.domain.repository import (
    ArtbookRepository,
    CommentLikeRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from artbook.persistence.database import create_engine, create_session_factory
from artbook.persistence.repository import (
    PostgresArtbookRepository,
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
    PostgresReportRepository,
    PostgresUserRepository,
)
from artbook.util.di.base import ProviderBase
from artbook.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Every write in a request shares this session, so an artbook with
        its pages and post, or a cascading delete, commits as one unit.
        Committed when the request finishes, rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_artbook_repository(self, session: AsyncSession) -> ArtbookRepository:
        """Provide Artbook repository."""
        return PostgresArtbookRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like repository."""
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        """Provide CommentLike repository."""
        return PostgresCommentLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, session: AsyncSession) -> ReportRepository:
        """Provide Report repository."""
        return PostgresReportRepository(session)
