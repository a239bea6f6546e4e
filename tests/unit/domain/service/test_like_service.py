"""Unit tests for LikeService."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from artbook.domain.model import CommentLike, Like
from artbook.domain.repository import CommentLikeRepository, LikeRepository
from artbook.domain.service import CommentService, LikeService
from artbook.domain.value import CommentLikeId, LikeId
from tests.conftest import save_artbook, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTogglePostLike:
    """Toggling is the only way likes change."""

    @pytest.mark.asyncio
    async def test_toggle_twice_returns_to_unliked(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)

        # Act
        first = await like_service.toggle_post_like(post.id, author.id)
        second = await like_service.toggle_post_like(post.id, author.id)

        # Assert
        assert (first.liked, first.like_count) == (True, 1)
        assert (second.liked, second.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_count_reflects_all_users(self, unit_env):
        like_service = await unit_env.get(LikeService)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        _, post = await save_artbook(unit_env, alice)

        await like_service.toggle_post_like(post.id, alice.id)
        state = await like_service.toggle_post_like(post.id, bob.id)

        assert state.like_count == 2
        alice_view = await like_service.get_post_like_state(post.id, alice.id)
        assert alice_view.liked is True

    @pytest.mark.asyncio
    async def test_anonymous_state_is_never_liked(self, unit_env):
        like_service = await unit_env.get(LikeService)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        await like_service.toggle_post_like(post.id, author.id)

        state = await like_service.get_post_like_state(post.id, None)

        assert state.liked is False
        assert state.like_count == 1


class TestToggleCommentLike:
    """Comment likes follow the same toggle rules."""

    @pytest.mark.asyncio
    async def test_toggle_comment_like_round_trip(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_service = await unit_env.get(CommentService)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "Nice!")

        # Act
        liked = await like_service.toggle_comment_like(comment.id, author.id)
        state = await like_service.get_comment_like_state(comment.id, author.id)
        unliked = await like_service.toggle_comment_like(comment.id, author.id)

        # Assert
        assert (liked.liked, liked.like_count) == (True, 1)
        assert state.liked is True
        assert (unliked.liked, unliked.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_comment_and_post_likes_are_independent(self, unit_env):
        like_service = await unit_env.get(LikeService)
        comment_service = await unit_env.get(CommentService)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "Nice!")

        await like_service.toggle_comment_like(comment.id, author.id)

        post_state = await like_service.get_post_like_state(post.id, author.id)
        assert post_state.like_count == 0
        assert post_state.liked is False


async def missing(*args):
    """A read that ran before a concurrent request wrote its row."""
    return None


async def lost_insert(like):
    raise IntegrityError("Duplicate like", None, Exception())


class TestConcurrentToggles:
    """Two toggles racing on the same row still give consistent answers."""

    @pytest.mark.asyncio
    async def test_post_like_insert_losing_race_reports_liked(
        self, unit_env, monkeypatch
    ):
        # Arrange: another request liked the post after our existence check
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        await like_service.toggle_post_like(post.id, author.id)
        monkeypatch.setattr(like_repo, "find_by_user_and_post", missing)
        monkeypatch.setattr(like_repo, "save", lost_insert)

        # Act
        state = await like_service.toggle_post_like(post.id, author.id)

        # Assert
        assert (state.liked, state.like_count) == (True, 1)

    @pytest.mark.asyncio
    async def test_post_like_delete_finding_no_row_reports_unliked(
        self, unit_env, monkeypatch
    ):
        # Arrange: another request unliked the post after our existence check
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        stale = Like(
            id=LikeId(uuid4()),
            user_id=author.id,
            post_id=post.id,
            created_at=datetime.now(),
        )

        async def stale_find(user_id, post_id):
            return stale

        monkeypatch.setattr(like_repo, "find_by_user_and_post", stale_find)

        # Act
        state = await like_service.toggle_post_like(post.id, author.id)

        # Assert
        assert (state.liked, state.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_comment_like_insert_losing_race_reports_liked(
        self, unit_env, monkeypatch
    ):
        like_service = await unit_env.get(LikeService)
        comment_service = await unit_env.get(CommentService)
        comment_like_repo = await unit_env.get(CommentLikeRepository)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "Nice!")
        await like_service.toggle_comment_like(comment.id, author.id)
        monkeypatch.setattr(comment_like_repo, "find_by_user_and_comment", missing)
        monkeypatch.setattr(comment_like_repo, "save", lost_insert)

        state = await like_service.toggle_comment_like(comment.id, author.id)

        assert (state.liked, state.like_count) == (True, 1)

    @pytest.mark.asyncio
    async def test_comment_like_delete_finding_no_row_reports_unliked(
        self, unit_env, monkeypatch
    ):
        like_service = await unit_env.get(LikeService)
        comment_service = await unit_env.get(CommentService)
        comment_like_repo = await unit_env.get(CommentLikeRepository)
        author = await save_user(unit_env)
        _, post = await save_artbook(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "Nice!")
        stale = CommentLike(
            id=CommentLikeId(uuid4()),
            user_id=author.id,
            comment_id=comment.id,
            created_at=datetime.now(),
        )

        async def stale_find(user_id, comment_id):
            return stale

        monkeypatch.setattr(comment_like_repo, "find_by_user_and_comment", stale_find)

        state = await like_service.toggle_comment_like(comment.id, author.id)

        assert (state.liked, state.like_count) == (False, 0)
