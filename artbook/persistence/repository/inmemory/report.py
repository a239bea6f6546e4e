"""In-memory report repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from artbook.domain.model.report import Report
from artbook.domain.repository.report import ReportRepository
from artbook.domain.value import ArtbookId, UserId

from .store import InMemoryStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_reporter_and_artbook(
        self, reporter_id: UserId, artbook_id: ArtbookId
    ) -> Optional[Report]:
        """Find a user's report on an artbook."""
        for report in self._store.reports:
            if report.reporter_id == reporter_id and report.artbook_id == artbook_id:
                return report
        return None

    async def save(self, report: Report) -> Report:
        """Save a report.

        Raises:
            IntegrityError: If the user already reported the artbook
        """
        if await self.find_by_reporter_and_artbook(report.reporter_id, report.artbook_id):
            raise IntegrityError("Duplicate report", None, Exception())
        self._store.reports.append(report)
        return report

    async def delete_by_artbook(self, artbook_id: ArtbookId) -> int:
        """Delete every report on an artbook."""
        before = len(self._store.reports)
        self._store.reports[:] = [
            r for r in self._store.reports if r.artbook_id != artbook_id
        ]
        return before - len(self._store.reports)
