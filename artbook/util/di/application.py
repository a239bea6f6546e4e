"""Application layer DI providers."""

from dishka import Scope, provide

from artbook.application.usecase.artbook import (
    CreateArtbookUseCase,
    DeleteArtbookUseCase,
    GetArtbookUseCase,
    ListArtbooksUseCase,
    RecordViewUseCase,
    UpdateArtbookUseCase,
)
from artbook.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    UpdateCommentUseCase,
)
from artbook.application.usecase.like import (
    GetArtbookLikeStatusUseCase,
    GetCommentLikeStatusUseCase,
    ToggleArtbookLikeUseCase,
    ToggleCommentLikeUseCase,
)
from artbook.application.usecase.report import (
    CreateReportUseCase,
    GetReportStatusUseCase,
)
from artbook.config import CommentSettings
from artbook.domain.service import (
    ArtbookService,
    CommentService,
    LikeService,
    ReportService,
    UserService,
)
from artbook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Artbook use cases
    @provide
    def get_create_artbook_use_case(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> CreateArtbookUseCase:
        """Provide create artbook use case."""
        return CreateArtbookUseCase(
            artbook_service=artbook_service, user_service=user_service
        )

    @provide
    def get_get_artbook_use_case(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> GetArtbookUseCase:
        """Provide get artbook use case."""
        return GetArtbookUseCase(
            artbook_service=artbook_service, user_service=user_service
        )

    @provide
    def get_list_artbooks_use_case(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> ListArtbooksUseCase:
        """Provide list artbooks use case."""
        return ListArtbooksUseCase(
            artbook_service=artbook_service, user_service=user_service
        )

    @provide
    def get_update_artbook_use_case(
        self, artbook_service: ArtbookService, user_service: UserService
    ) -> UpdateArtbookUseCase:
        """Provide update artbook use case."""
        return UpdateArtbookUseCase(
            artbook_service=artbook_service, user_service=user_service
        )

    @provide
    def get_delete_artbook_use_case(
        self, artbook_service: ArtbookService
    ) -> DeleteArtbookUseCase:
        """Provide delete artbook use case."""
        return DeleteArtbookUseCase(artbook_service=artbook_service)

    @provide
    def get_record_view_use_case(
        self, artbook_service: ArtbookService
    ) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(artbook_service=artbook_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            artbook_service=artbook_service, comment_service=comment_service
        )

    @provide
    def get_get_comments_use_case(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            artbook_service=artbook_service,
            comment_service=comment_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_get_replies_use_case(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            artbook_service=artbook_service, comment_service=comment_service
        )

    @provide
    def get_update_comment_use_case(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            artbook_service=artbook_service, comment_service=comment_service
        )

    @provide
    def get_delete_comment_use_case(
        self, artbook_service: ArtbookService, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            artbook_service=artbook_service, comment_service=comment_service
        )

    # Like use cases
    @provide
    def get_toggle_artbook_like_use_case(
        self, artbook_service: ArtbookService, like_service: LikeService
    ) -> ToggleArtbookLikeUseCase:
        """Provide toggle artbook like use case."""
        return ToggleArtbookLikeUseCase(
            artbook_service=artbook_service, like_service=like_service
        )

    @provide
    def get_get_artbook_like_status_use_case(
        self, artbook_service: ArtbookService, like_service: LikeService
    ) -> GetArtbookLikeStatusUseCase:
        """Provide artbook like status use case."""
        return GetArtbookLikeStatusUseCase(
            artbook_service=artbook_service, like_service=like_service
        )

    @provide
    def get_toggle_comment_like_use_case(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            artbook_service=artbook_service,
            comment_service=comment_service,
            like_service=like_service,
        )

    @provide
    def get_get_comment_like_status_use_case(
        self,
        artbook_service: ArtbookService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> GetCommentLikeStatusUseCase:
        """Provide comment like status use case."""
        return GetCommentLikeStatusUseCase(
            artbook_service=artbook_service,
            comment_service=comment_service,
            like_service=like_service,
        )

    # Report use cases
    @provide
    def get_create_report_use_case(
        self, artbook_service: ArtbookService, report_service: ReportService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(
            artbook_service=artbook_service, report_service=report_service
        )

    @provide
    def get_get_report_status_use_case(
        self, artbook_service: ArtbookService, report_service: ReportService
    ) -> GetReportStatusUseCase:
        """Provide report status use case."""
        return GetReportStatusUseCase(
            artbook_service=artbook_service, report_service=report_service
        )
