"""Integration tests for the PostgreSQL comment and like repositories.

These run against a migrated database and check the queries the in-memory
repositories only imitate: ordering, batched counts and unique likes.
"""

import os
from datetime import datetime
from uuid import uuid4

import pytest

from artbook.domain.model import CommentLike
from artbook.domain.repository import CommentLikeRepository, CommentRepository
from artbook.domain.value import CommentLikeId
from tests.conftest import minutes_ago, save_artbook, save_comment, save_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_top_level_page_is_newest_first(self, integration_env):
        # Arrange
        author = await save_user(integration_env)
        _, post = await save_artbook(integration_env, author, title=f"Book {uuid4()}")
        older = await save_comment(
            integration_env, post.id, author, "First", created_at=minutes_ago(5)
        )
        newer = await save_comment(
            integration_env, post.id, author, "Second", created_at=minutes_ago(1)
        )
        await save_comment(integration_env, post.id, author, "Reply", older.id)
        comment_repo = await integration_env.get(CommentRepository)

        # Act
        page = await comment_repo.find_top_level(post.id, limit=10, offset=0)
        total = await comment_repo.count_top_level(post.id)
        reply_counts = await comment_repo.count_replies([older.id, newer.id])

        # Assert
        assert [c.id for c in page] == [newer.id, older.id]
        assert total == 2
        assert reply_counts.get(older.id, 0) == 1
        assert reply_counts.get(newer.id, 0) == 0

    @pytest.mark.asyncio
    async def test_comment_likes_are_counted_per_comment(self, integration_env):
        author = await save_user(integration_env)
        reader = await save_user(integration_env, "Bob")
        _, post = await save_artbook(integration_env, author, title=f"Book {uuid4()}")
        liked = await save_comment(integration_env, post.id, author, "Liked")
        ignored = await save_comment(integration_env, post.id, author, "Ignored")
        like_repo = await integration_env.get(CommentLikeRepository)
        for user in (author, reader):
            await like_repo.save(
                CommentLike(
                    id=CommentLikeId(uuid4()),
                    user_id=user.id,
                    comment_id=liked.id,
                    created_at=datetime.now(),
                )
            )

        counts = await like_repo.count_by_comments([liked.id, ignored.id])
        removed = await like_repo.delete_by_user_and_comment(reader.id, liked.id)

        assert counts.get(liked.id, 0) == 2
        assert counts.get(ignored.id, 0) == 0
        assert removed is True
