"""PostgreSQL implementation of Report repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from artbook.domain.model import Report
from artbook.domain.repository import ReportRepository
from artbook.domain.value import ArtbookId, UserId
from artbook.persistence.mappers import report_to_dict, row_to_report
from artbook.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_reporter_and_artbook(
        self, reporter_id: UserId, artbook_id: ArtbookId
    ) -> Optional[Report]:
        """Find a user's report on an artbook."""
        stmt = select(reports_table).where(
            and_(
                reports_table.c.reporter_id == reporter_id,
                reports_table.c.artbook_id == artbook_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def save(self, report: Report) -> Report:
        """Save a report (create)."""
        stmt = insert(reports_table).values(**report_to_dict(report))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return report

    async def delete_by_artbook(self, artbook_id: ArtbookId) -> int:
        """Delete every report on an artbook."""
        result = await self.session.execute(
            delete(reports_table).where(reports_table.c.artbook_id == artbook_id)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
