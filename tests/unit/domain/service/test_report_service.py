"""Unit tests for ReportService."""

import pytest

from artbook.domain.error import (
    ConflictError,
    DuplicateReportError,
    NotAuthorizedError,
    ValidationError,
)
from artbook.domain.service import ReportService
from artbook.domain.value import ReportCategory, ReportStatus
from tests.conftest import save_artbook, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateReport:
    """Tests for filing reports."""

    @pytest.mark.asyncio
    async def test_report_is_pending_with_parsed_category(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env, "Alice")
        reader = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, author)

        report = await report_service.create_report(
            artbook, reader.id, "spam-misleading", "  Same story posted twice  "
        )

        assert report.category == ReportCategory.SPAM_MISLEADING
        assert report.status == ReportStatus.PENDING
        assert report.description == "Same story posted twice"
        assert await report_service.get_report(artbook, reader.id) == report

    @pytest.mark.parametrize(
        "category, expected",
        [
            ("OTHER", ReportCategory.OTHER),
            ("copyright", ReportCategory.COPYRIGHT_VIOLATION),
            ("violence-gore", ReportCategory.VIOLENCE_GORE),
        ],
    )
    def test_category_aliases(self, category, expected):
        assert ReportCategory.parse(category) == expected

    @pytest.mark.asyncio
    async def test_second_report_is_conflict(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env, "Alice")
        reader = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, author)
        await report_service.create_report(artbook, reader.id, "spam")

        with pytest.raises(DuplicateReportError) as exc_info:
            await report_service.create_report(artbook, reader.id, "other")
        assert isinstance(exc_info.value, ConflictError)

    @pytest.mark.asyncio
    async def test_author_cannot_report_own_artbook(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, author)

        with pytest.raises(NotAuthorizedError):
            await report_service.create_report(artbook, author.id, "spam")

    @pytest.mark.asyncio
    async def test_unknown_category_is_rejected(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env, "Alice")
        reader = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, author)

        with pytest.raises(ValidationError):
            await report_service.create_report(artbook, reader.id, "boring")

    @pytest.mark.asyncio
    async def test_short_description_is_rejected(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env, "Alice")
        reader = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, author)

        with pytest.raises(ValidationError):
            await report_service.create_report(artbook, reader.id, "spam", "meh")

    @pytest.mark.asyncio
    async def test_no_report_means_none(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await save_user(unit_env, "Alice")
        reader = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, author)

        assert await report_service.get_report(artbook, reader.id) is None
