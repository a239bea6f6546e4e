"""Report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from artbook.domain.model.common import DomainModel
from artbook.domain.value import ArtbookId, ReportCategory, ReportId, ReportStatus, UserId

MIN_REPORT_DESCRIPTION = 10
MAX_REPORT_DESCRIPTION = 500


class Report(DomainModel):
    """A reader's flag on an artbook.

    One report per reporter per artbook (enforced by database unique
    constraint). Authors cannot report their own artbooks.
    """

    id: ReportId
    artbook_id: ArtbookId
    reporter_id: UserId
    category: ReportCategory
    description: Optional[str] = Field(
        default=None,
        min_length=MIN_REPORT_DESCRIPTION,
        max_length=MAX_REPORT_DESCRIPTION,
    )
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
