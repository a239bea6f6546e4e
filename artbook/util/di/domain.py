"""Domain layer DI providers."""

from dishka import Scope, provide

from artbook.config import AuthSettings
from artbook.domain.repository import (
    ArtbookRepository,
    CommentLikeRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from artbook.domain.service import (
    ArtbookService,
    CommentService,
    JWTService,
    LikeService,
    ReportService,
    UserService,
)
from artbook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_artbook_service(
        self,
        artbook_repository: ArtbookRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        comment_like_repository: CommentLikeRepository,
        report_repository: ReportRepository,
    ) -> ArtbookService:
        """Provide artbook domain service."""
        return ArtbookService(
            artbook_repository=artbook_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
            comment_like_repository=comment_like_repository,
            report_repository=report_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
        user_repository: UserRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_like_repository=comment_like_repository,
            user_repository=user_repository,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            comment_like_repository=comment_like_repository,
        )

    @provide
    def get_report_service(self, report_repository: ReportRepository) -> ReportService:
        """Provide report domain service."""
        return ReportService(report_repository=report_repository)
