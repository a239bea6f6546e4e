"""Report domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from artbook.domain.error import DuplicateReportError, NotAuthorizedError, ValidationError
from artbook.domain.model.artbook import Artbook
from artbook.domain.model.report import (
    MAX_REPORT_DESCRIPTION,
    MIN_REPORT_DESCRIPTION,
    Report,
)
from artbook.domain.repository import ReportRepository
from artbook.domain.value import ReportCategory, ReportId, ReportStatus, UserId

from .base import Service


class ReportService(Service):
    """Domain service for reader reports on artbooks."""

    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def create_report(
        self,
        artbook: Artbook,
        reporter_id: UserId,
        category: str,
        description: str | None = None,
    ) -> Report:
        """File a report against an artbook.

        Args:
            artbook: Reported artbook
            reporter_id: Reporting user
            category: Category name or alias ("spam", "spam-misleading", ...)
            description: Optional details, 10-500 characters when given

        Returns:
            The pending report

        Raises:
            NotAuthorizedError: If the reporter wrote the artbook
            ValidationError: If the category or description is invalid
            DuplicateReportError: If the reporter already reported this artbook
        """
        with logfire.span(
            "report_service.create_report",
            artbook_id=str(artbook.id),
            reporter_id=str(reporter_id),
            category=category,
        ):
            if artbook.author_id == reporter_id:
                logfire.warn(
                    "Self-report attempt",
                    artbook_id=str(artbook.id),
                    reporter_id=str(reporter_id),
                )
                raise NotAuthorizedError(
                    "artbook", str(artbook.id), str(reporter_id), action="report"
                )

            try:
                parsed_category = ReportCategory.parse(category)
            except ValueError as e:
                raise ValidationError(str(e)) from e

            if description is not None:
                description = description.strip() or None
            if description is not None and not (
                MIN_REPORT_DESCRIPTION <= len(description) <= MAX_REPORT_DESCRIPTION
            ):
                raise ValidationError(
                    f"Description must be {MIN_REPORT_DESCRIPTION}-"
                    f"{MAX_REPORT_DESCRIPTION} characters"
                )

            existing = await self.report_repository.find_by_reporter_and_artbook(
                reporter_id, artbook.id
            )
            if existing:
                logfire.warn(
                    "Duplicate report attempt",
                    artbook_id=str(artbook.id),
                    reporter_id=str(reporter_id),
                )
                raise DuplicateReportError(str(artbook.id), str(reporter_id))

            report = Report(
                id=ReportId(uuid4()),
                artbook_id=artbook.id,
                reporter_id=reporter_id,
                category=parsed_category,
                description=description,
                status=ReportStatus.PENDING,
                created_at=datetime.now(),
            )
            try:
                saved = await self.report_repository.save(report)
            except IntegrityError:
                logfire.warn(
                    "Duplicate report (concurrent)",
                    artbook_id=str(artbook.id),
                    reporter_id=str(reporter_id),
                )
                raise DuplicateReportError(str(artbook.id), str(reporter_id))

            logfire.info(
                "Report created",
                report_id=str(saved.id),
                artbook_id=str(artbook.id),
                category=parsed_category.value,
            )
            return saved

    async def get_report(self, artbook: Artbook, reporter_id: UserId) -> Report | None:
        """Get the user's report on an artbook, if any."""
        return await self.report_repository.find_by_reporter_and_artbook(
            reporter_id, artbook.id
        )
