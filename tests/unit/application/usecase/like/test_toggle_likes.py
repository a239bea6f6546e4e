"""Unit tests for the like use cases."""

import pytest

from artbook.application.usecase.like import (
    GetArtbookLikeStatusRequest,
    GetArtbookLikeStatusUseCase,
    GetCommentLikeStatusRequest,
    GetCommentLikeStatusUseCase,
    ToggleArtbookLikeRequest,
    ToggleArtbookLikeUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from artbook.domain.error import ConflictError, NotFoundError
from tests.conftest import save_artbook, save_comment, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleArtbookLike:
    """Tests for ToggleArtbookLikeUseCase."""

    @pytest.mark.asyncio
    async def test_messages_follow_state(self, unit_env):
        use_case = await unit_env.get(ToggleArtbookLikeUseCase)
        status_use_case = await unit_env.get(GetArtbookLikeStatusUseCase)
        alice = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, alice)
        request = ToggleArtbookLikeRequest(slug=str(artbook.slug), user_id=str(alice.id))

        liked = await use_case.execute(request)
        status = await status_use_case.execute(
            GetArtbookLikeStatusRequest(slug=str(artbook.slug), viewer_id=str(alice.id))
        )
        unliked = await use_case.execute(request)

        assert (liked.liked, liked.like_count) == (True, 1)
        assert liked.message == "Post liked successfully"
        assert (status.user_liked, status.like_count) == (True, 1)
        assert (unliked.liked, unliked.like_count) == (False, 0)
        assert unliked.message == "Post unliked successfully"

    @pytest.mark.asyncio
    async def test_unknown_artbook_is_not_found(self, unit_env):
        use_case = await unit_env.get(ToggleArtbookLikeUseCase)
        alice = await save_user(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleArtbookLikeRequest(slug="nope", user_id=str(alice.id))
            )


class TestToggleCommentLike:
    """Tests for ToggleCommentLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_and_status(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        status_use_case = await unit_env.get(GetCommentLikeStatusUseCase)
        alice = await save_user(unit_env)
        artbook, post = await save_artbook(unit_env, alice)
        comment = await save_comment(unit_env, post.id, alice)

        response = await use_case.execute(
            ToggleCommentLikeRequest(
                slug=str(artbook.slug), comment_id=str(comment.id), user_id=str(alice.id)
            )
        )
        anonymous = await status_use_case.execute(
            GetCommentLikeStatusRequest(
                slug=str(artbook.slug), comment_id=str(comment.id)
            )
        )

        assert response.liked is True
        assert response.message == "Comment liked"
        assert (anonymous.user_liked, anonymous.like_count) == (False, 1)

    @pytest.mark.asyncio
    async def test_comment_from_other_artbook_is_conflict(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        alice = await save_user(unit_env)
        _, post = await save_artbook(unit_env, alice, title="Home")
        elsewhere, _ = await save_artbook(unit_env, alice, title="Elsewhere")
        comment = await save_comment(unit_env, post.id, alice)

        with pytest.raises(ConflictError):
            await use_case.execute(
                ToggleCommentLikeRequest(
                    slug=str(elsewhere.slug),
                    comment_id=str(comment.id),
                    user_id=str(alice.id),
                )
            )
