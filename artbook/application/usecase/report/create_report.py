"""Create report use case."""

from uuid import UUID

from pydantic import BaseModel

from artbook.application.usecase.base import ApiModel, BaseUseCase
from artbook.application.usecase.report.common import ReportItem
from artbook.domain.error import NotFoundError
from artbook.domain.service import ArtbookService, ReportService
from artbook.domain.value import UserId


class CreateReportRequest(BaseModel):
    """Create report request."""

    slug: str
    reporter_id: str
    category: str
    description: str | None = None


class CreateReportResponse(ApiModel):
    """Create report response."""

    report: ReportItem
    message: str


class CreateReportUseCase(BaseUseCase):
    """Use case for flagging an artbook."""

    def __init__(
        self, artbook_service: ArtbookService, report_service: ReportService
    ) -> None:
        self.artbook_service = artbook_service
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreateReportResponse:
        """Execute create report flow.

        Raises:
            NotFoundError: If the artbook does not exist or is hidden
            NotAuthorizedError: If the reporter is the author
            ValidationError: If the category or description is invalid
            DuplicateReportError: If the reporter already reported it
        """
        reporter_id = UserId(UUID(request.reporter_id))
        artbook = await self.artbook_service.get_artbook_by_slug(request.slug)
        if artbook is None:
            raise NotFoundError("Artbook", request.slug)
        self.artbook_service.ensure_visible(artbook, reporter_id)

        report = await self.report_service.create_report(
            artbook=artbook,
            reporter_id=reporter_id,
            category=request.category,
            description=request.description,
        )
        return CreateReportResponse(
            report=ReportItem.from_report(report),
            message="Report submitted successfully",
        )
