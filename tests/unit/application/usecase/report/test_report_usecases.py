"""Unit tests for the report use cases."""

import pytest

from artbook.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    GetReportStatusRequest,
    GetReportStatusUseCase,
)
from artbook.domain.error import NotFoundError
from tests.conftest import save_artbook, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReportUseCases:
    """Tests for CreateReportUseCase and GetReportStatusUseCase."""

    @pytest.mark.asyncio
    async def test_report_then_status(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateReportUseCase)
        status_use_case = await unit_env.get(GetReportStatusUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, alice)
        slug = str(artbook.slug)

        # Act
        before = await status_use_case.execute(
            GetReportStatusRequest(slug=slug, user_id=str(bob.id))
        )
        created = await create_use_case.execute(
            CreateReportRequest(slug=slug, reporter_id=str(bob.id), category="adult")
        )
        after = await status_use_case.execute(
            GetReportStatusRequest(slug=slug, user_id=str(bob.id))
        )

        # Assert
        assert before.has_reported is False
        assert before.report is None
        assert created.message == "Report submitted successfully"
        assert created.report.category == "ADULT_CONTENT"
        assert created.report.status == "PENDING"
        assert after.has_reported is True
        assert after.report.id == created.report.id

    @pytest.mark.asyncio
    async def test_reporting_hidden_artbook_is_not_found(self, unit_env):
        create_use_case = await unit_env.get(CreateReportUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, alice, is_public=False)

        with pytest.raises(NotFoundError):
            await create_use_case.execute(
                CreateReportRequest(
                    slug=str(artbook.slug), reporter_id=str(bob.id), category="spam"
                )
            )
