"""Unit tests for the comment write use cases."""

from uuid import uuid4

import pytest

from artbook.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from artbook.domain.error import NotFoundError, ResourceMismatchError
from tests.conftest import save_artbook, save_comment, save_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_created_comment_is_enriched(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        artbook, post = await save_artbook(unit_env, alice)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                slug=str(artbook.slug), content="Nice!", author_id=str(alice.id)
            )
        )

        # Assert
        comment = response.comment
        assert comment.content == "Nice!"
        assert comment.post_id == str(post.id)
        assert comment.parent_id is None
        assert comment.author.name == "Alice"
        assert (comment.reply_count, comment.like_count) == (0, 0)
        assert comment.viewer_liked is False
        assert comment.replies == []

    @pytest.mark.asyncio
    async def test_reply_carries_parent_id(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, post = await save_artbook(unit_env, alice)
        parent = await save_comment(unit_env, post.id, alice)

        response = await use_case.execute(
            CreateCommentRequest(
                slug=str(artbook.slug),
                content="Thanks!",
                author_id=str(bob.id),
                parent_id=str(parent.id),
            )
        )

        assert response.comment.parent_id == str(parent.id)

    @pytest.mark.asyncio
    async def test_malformed_parent_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, alice)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    slug=str(artbook.slug),
                    content="Hi",
                    author_id=str(alice.id),
                    parent_id="42",
                )
            )

    @pytest.mark.asyncio
    async def test_private_artbook_only_open_to_author(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, _ = await save_artbook(unit_env, alice, is_public=False)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    slug=str(artbook.slug), content="Hi", author_id=str(bob.id)
                )
            )
        response = await use_case.execute(
            CreateCommentRequest(
                slug=str(artbook.slug), content="Note to self", author_id=str(alice.id)
            )
        )
        assert response.comment.content == "Note to self"


class TestUpdateAndDeleteUseCases:
    """Tests for UpdateCommentUseCase and DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_returns_enriched_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        artbook, post = await save_artbook(unit_env, alice)
        comment = await save_comment(unit_env, post.id, alice)

        response = await use_case.execute(
            UpdateCommentRequest(
                slug=str(artbook.slug),
                comment_id=str(comment.id),
                user_id=str(alice.id),
                content="<em>Edited</em>",
            )
        )

        assert response.comment.content == "Edited"
        assert response.comment.id == str(comment.id)

    @pytest.mark.asyncio
    async def test_delete_through_other_artbook_is_mismatch(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        alice = await save_user(unit_env)
        _, post = await save_artbook(unit_env, alice, title="Home")
        elsewhere, _ = await save_artbook(unit_env, alice, title="Elsewhere")
        comment = await save_comment(unit_env, post.id, alice)

        with pytest.raises(ResourceMismatchError):
            await use_case.execute(
                DeleteCommentRequest(
                    slug=str(elsewhere.slug),
                    comment_id=str(comment.id),
                    user_id=str(alice.id),
                )
            )

    @pytest.mark.asyncio
    async def test_delete_reports_success(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        alice = await save_user(unit_env)
        artbook, post = await save_artbook(unit_env, alice)
        comment = await save_comment(unit_env, post.id, alice)

        response = await use_case.execute(
            DeleteCommentRequest(
                slug=str(artbook.slug), comment_id=str(comment.id), user_id=str(alice.id)
            )
        )

        assert response.success is True
        assert response.message == "Comment deleted successfully"

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        alice = await save_user(unit_env)
        artbook, _ = await save_artbook(unit_env, alice)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    slug=str(artbook.slug), comment_id=str(uuid4()), user_id=str(alice.id)
                )
            )

    @pytest.mark.asyncio
    async def test_delete_on_private_artbook_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, post = await save_artbook(unit_env, alice, is_public=False)
        # Written before the artbook went private
        comment = await save_comment(unit_env, post.id, bob)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    slug=str(artbook.slug), comment_id=str(comment.id), user_id=str(bob.id)
                )
            )

    @pytest.mark.asyncio
    async def test_update_on_private_artbook_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        alice = await save_user(unit_env, "Alice")
        bob = await save_user(unit_env, "Bob")
        artbook, post = await save_artbook(unit_env, alice, is_public=False)
        comment = await save_comment(unit_env, post.id, bob)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    slug=str(artbook.slug),
                    comment_id=str(comment.id),
                    user_id=str(bob.id),
                    content="Edited",
                )
            )
