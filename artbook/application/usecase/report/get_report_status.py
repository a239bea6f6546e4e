"""Get report status use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.application.usecase.report.common import ReportItem
from artbook.domain.error import NotFoundError
from artbook.domain.service import ArtbookService, ReportService
from artbook.domain.value import UserId


class GetReportStatusRequest(BaseModel):
    """Get report status request."""

    slug: str
    user_id: str


class ReportStatusResponse(ApiModel):
    """Whether the user already reported the artbook."""

    has_reported: bool
    report: ReportItem | None = None


class GetReportStatusUseCase(BaseUseCase):
    """Use case for checking a user's own report on an artbook."""

    def __init__(
        self, artbook_service: ArtbookService, report_service: ReportService
    ) -> None:
        self.artbook_service = artbook_service
        self.report_service = report_service

    async def execute(self, request: GetReportStatusRequest) -> ReportStatusResponse:
        user_id = UserId(UUID(request.user_id))
        artbook = await self.artbook_service.get_artbook_by_slug(request.slug)
        if artbook is None:
            raise NotFoundError("Artbook", request.slug)
        self.artbook_service.ensure_visible(artbook, user_id)

        report = await self.report_service.get_report(artbook, user_id)
        return ReportStatusResponse(
            has_reported=report is not None,
            report=ReportItem.from_report(report) if report else None,
        )
