"""Report response items."""

from datetime import datetime

from artbook.application.usecase.base import ApiModel
from artbook.domain.model import Report


class ReportItem(ApiModel):
    """A report as shown to the reporter."""

    id: str
    artbook_id: str
    category: str
    description: str | None
    status: str
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            id=str(report.id),
            artbook_id=str(report.artbook_id),
            category=report.category.value,
            description=report.description,
            status=report.status.value,
            created_at=report.created_at,
        )
