"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from artbook.domain.model import (
    Artbook,
    Comment,
    CommentLike,
    Like,
    Page,
    Post,
    Report,
    User,
)
from artbook.domain.value import (
    ArtbookId,
    Category,
    CommentId,
    CommentLikeId,
    LikeId,
    PageId,
    PostId,
    ReportCategory,
    ReportId,
    ReportStatus,
    Slug,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """asyncpg returns UUID objects; other drivers may hand back strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email"),
        image=row.get("image"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_page(row: Dict[str, Any]) -> Page:
    """Convert database row to Page domain model."""
    return Page(
        id=PageId(_uuid(row["id"])),
        artbook_id=ArtbookId(_uuid(row["artbook_id"])),
        page_number=row["page_number"],
        content=row["content"],
        picture_url=row.get("picture_url"),
        audio_url=row.get("audio_url"),
        created_at=row["created_at"],
    )


def page_to_dict(page: Page) -> Dict[str, Any]:
    """Convert Page domain model to database dict."""
    return page.model_dump()


def row_to_artbook(row: Dict[str, Any], pages: Iterable[Page] = ()) -> Artbook:
    """Convert database row (plus already-mapped pages) to Artbook.

    Args:
        row: Artbook row as dict
        pages: Pages belonging to the artbook, any order

    Returns:
        Artbook domain model with pages ordered by page number
    """
    return Artbook(
        id=ArtbookId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        cover_photo=row.get("cover_photo"),
        category=Category(row["category"]),
        author_id=UserId(_uuid(row["author_id"])),
        is_public=row["is_public"],
        pages=sorted(pages, key=lambda p: p.page_number),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def artbook_to_dict(artbook: Artbook) -> Dict[str, Any]:
    """Convert Artbook to database dict (pages are stored separately)."""
    data = artbook.model_dump(exclude={"pages"})
    data["category"] = artbook.category.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        artbook_id=ArtbookId(_uuid(row["artbook_id"])),
        views=row["views"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        artbook_id=ArtbookId(_uuid(row["artbook_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        category=ReportCategory(row["category"]),
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["category"] = report.category.value
    data["status"] = report.status.value
    return data
