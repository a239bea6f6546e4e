"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from artbook.domain.model import Comment, User
from artbook.domain.repository import CommentRepository, UserRepository
from artbook.domain.service import ArtbookService, PageDraft
from artbook.domain.value import Category, CommentId, PostId, UserId

# Spans and logs are created but never exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "Alice", user_id: UserId | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(id=user_id or UserId(uuid4()), name=name, email=None, image=None)


async def save_user(container, name: str = "Alice") -> User:
    """Create and persist a user through the container's repository."""
    user_repo = await container.get(UserRepository)
    return await user_repo.save(make_user(name))


async def save_artbook(
    container,
    author: User,
    title: str = "Fairy Tale",
    is_public: bool = True,
    category: Category = Category.ADVENTURE,
):
    """Create an artbook (with its post) through the artbook service."""
    artbook_service = await container.get(ArtbookService)
    return await artbook_service.create_artbook(
        author_id=author.id,
        title=title,
        category=category,
        pages=[PageDraft(page_number=1, content="Once upon a time")],
        is_public=is_public,
    )


async def save_comment(
    container,
    post_id: PostId,
    author: User,
    content: str = "Nice!",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Persist a comment directly, bypassing depth checks.

    Use an explicit ``created_at`` to control ordering.
    """
    comment_repo = await container.get(CommentRepository)
    created = created_at or datetime.now()
    return await comment_repo.save(
        Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            author_id=author.id,
            content=content,
            parent_id=parent_id,
            created_at=created,
            updated_at=created,
        )
    )


def minutes_ago(minutes: int) -> datetime:
    """Timestamp ``minutes`` before now."""
    return datetime.now() - timedelta(minutes=minutes)
