"""Unit tests for the artbook use cases."""

import pytest

from artbook.application.usecase.artbook import (
    CreateArtbookRequest,
    CreateArtbookUseCase,
    DeleteArtbookRequest,
    DeleteArtbookUseCase,
    GetArtbookRequest,
    GetArtbookUseCase,
    ListArtbooksRequest,
    ListArtbooksUseCase,
    PageInput,
    RecordViewRequest,
    RecordViewUseCase,
    UpdateArtbookRequest,
    UpdateArtbookUseCase,
)
from artbook.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from artbook.domain.service import LikeService
from artbook.domain.value import Category
from tests.conftest import save_artbook, save_comment, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateArtbookUseCase:
    """Tests for CreateArtbookUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_pages_and_author(self, unit_env):
        use_case = await unit_env.get(CreateArtbookUseCase)
        alice = await save_user(unit_env, "Alice")

        response = await use_case.execute(
            CreateArtbookRequest(
                author_id=str(alice.id),
                title="Fairy Tale",
                category="romantic",
                pages=[PageInput(page_number=1, content="Once upon a time")],
            )
        )

        artbook = response.artbook
        assert artbook.slug == "fairy-tale"
        assert artbook.category == "ROMANTIC"
        assert artbook.author.name == "Alice"
        assert [p.content for p in artbook.pages] == ["Once upon a time"]
        assert (artbook.stats.likes, artbook.stats.comments, artbook.stats.views) == (
            0,
            0,
            0,
        )


class TestGetArtbookUseCase:
    """Opening an artbook counts a view."""

    @pytest.mark.asyncio
    async def test_each_open_counts_a_view(self, unit_env):
        use_case = await unit_env.get(GetArtbookUseCase)
        record_view = await unit_env.get(RecordViewUseCase)
        alice = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, alice)
        slug = str(artbook.slug)

        first = await use_case.execute(GetArtbookRequest(slug=slug))
        viewed = await record_view.execute(RecordViewRequest(slug=slug))
        second = await use_case.execute(GetArtbookRequest(slug=slug))

        assert first.artbook.stats.views == 1
        assert viewed.views == 2
        assert second.artbook.stats.views == 3
        assert len(second.artbook.pages) == 1

    @pytest.mark.asyncio
    async def test_private_artbook_is_not_found_for_others(self, unit_env):
        use_case = await unit_env.get(GetArtbookUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, alice, is_public=False)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetArtbookRequest(slug=str(artbook.slug), viewer_id=str(bob.id))
            )
        own = await use_case.execute(
            GetArtbookRequest(slug=str(artbook.slug), viewer_id=str(alice.id))
        )
        assert own.artbook.is_public is False


class TestListArtbooksUseCase:
    """Tests for listings and dashboards."""

    @pytest.mark.asyncio
    async def test_listing_carries_aggregate_stats(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListArtbooksUseCase)
        like_service = await unit_env.get(LikeService)
        alice = await save_user(unit_env, "Alice")
        artbook, post = await save_artbook(unit_env, alice)
        top = await save_comment(unit_env, post.id, alice)
        await save_comment(unit_env, post.id, alice, "Reply", parent_id=top.id)
        await like_service.toggle_post_like(post.id, alice.id)

        # Act
        response = await use_case.execute(ListArtbooksRequest())

        # Assert
        [item] = response.artbooks
        assert item.id == str(artbook.id)
        assert (item.stats.likes, item.stats.comments) == (1, 2)
        assert item.pages == []
        assert item.author.name == "Alice"

    @pytest.mark.asyncio
    async def test_private_artbooks_only_on_own_dashboard(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListArtbooksUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        await save_artbook(unit_env, alice, title="Public")
        await save_artbook(unit_env, alice, title="Private", is_public=False)

        # Act
        everyone = await use_case.execute(ListArtbooksRequest())
        bob_view = await use_case.execute(
            ListArtbooksRequest(author_id=str(alice.id), viewer_id=str(bob.id))
        )
        dashboard = await use_case.execute(
            ListArtbooksRequest(author_id=str(alice.id), viewer_id=str(alice.id))
        )

        # Assert
        assert [a.title for a in everyone.artbooks] == ["Public"]
        assert [a.title for a in bob_view.artbooks] == ["Public"]
        assert {a.title for a in dashboard.artbooks} == {"Public", "Private"}

    @pytest.mark.asyncio
    async def test_category_filter_is_case_insensitive(self, unit_env):
        use_case = await unit_env.get(ListArtbooksUseCase)
        alice = await save_user(unit_env)
        await save_artbook(unit_env, alice, title="Scary", category=Category.HORROR)
        await save_artbook(unit_env, alice, title="Brave", category=Category.ADVENTURE)

        response = await use_case.execute(ListArtbooksRequest(category="horror"))

        assert [a.title for a in response.artbooks] == ["Scary"]

    @pytest.mark.asyncio
    async def test_invalid_filters_are_validation_errors(self, unit_env):
        use_case = await unit_env.get(ListArtbooksUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListArtbooksRequest(category="poetry"))
        with pytest.raises(ValidationError):
            await use_case.execute(ListArtbooksRequest(author_id="someone"))


class TestUpdateAndDeleteArtbookUseCases:
    """Tests for UpdateArtbookUseCase and DeleteArtbookUseCase."""

    @pytest.mark.asyncio
    async def test_update_uppercases_category(self, unit_env):
        use_case = await unit_env.get(UpdateArtbookUseCase)
        alice = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, alice)

        response = await use_case.execute(
            UpdateArtbookRequest(
                slug=str(artbook.slug),
                user_id=str(alice.id),
                changes={"category": "figure", "description": "Updated"},
            )
        )

        assert response.artbook.category == "FIGURE"
        assert response.artbook.description == "Updated"

    @pytest.mark.asyncio
    async def test_delete_by_other_user_is_forbidden(self, unit_env):
        use_case = await unit_env.get(DeleteArtbookUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, alice)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteArtbookRequest(slug=str(artbook.slug), user_id=str(bob.id))
            )

        response = await use_case.execute(
            DeleteArtbookRequest(slug=str(artbook.slug), user_id=str(alice.id))
        )
        assert response.success is True
