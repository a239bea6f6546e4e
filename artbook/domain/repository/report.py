"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from artbook.domain.model.report import Report
from artbook.domain.value import ArtbookId, UserId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_reporter_and_artbook(
        self, reporter_id: UserId, artbook_id: ArtbookId
    ) -> Optional[Report]:
        """Find a user's report on an artbook."""
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Save a report (create).

        Raises:
            IntegrityError: If the user already reported this artbook
        """
        pass

    @abstractmethod
    async def delete_by_artbook(self, artbook_id: ArtbookId) -> int:
        """Delete every report on an artbook.

        Returns:
            Number of reports deleted
        """
        pass
