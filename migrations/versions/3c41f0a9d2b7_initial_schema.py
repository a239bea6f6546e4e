"""initial_schema

Create the Artbook schema:
- Users (read-only here, written by the auth service)
- Artbooks and their pages (1-10 pages, unique page numbers)
- Posts (one engagement record per artbook, holds the view counter)
- Comments (threaded through parent_id, at most three levels deep)
- Likes on posts and on comments (one per user per target)
- Reports (one per user per artbook)

Revision ID: 3c41f0a9d2b7
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f0a9d2b7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ARTBOOK_CATEGORIES = ("ADVENTURE", "HORROR", "ACTION", "ROMANTIC", "FIGURE")
REPORT_CATEGORIES = (
    "INAPPROPRIATE_CONTENT",
    "COPYRIGHT_VIOLATION",
    "SPAM_MISLEADING",
    "HARASSMENT_BULLYING",
    "VIOLENCE_GORE",
    "ADULT_CONTENT",
    "OTHER",
)
REPORT_STATUSES = ("PENDING", "REVIEWED", "RESOLVED", "DISMISSED")


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _create_enum(name: str, values: Sequence[str]) -> None:
    labels = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    _create_enum("artbook_category", ARTBOOK_CATEGORIES)
    _create_enum("report_category", REPORT_CATEGORIES)
    _create_enum("report_status", REPORT_STATUSES)

    op.create_table(
        "users",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_email", "users", ["email"], unique=True)

    op.create_table(
        "artbooks",
        _id(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cover_photo", sa.Text(), nullable=True),
        sa.Column(
            "category",
            postgresql.ENUM(
                *ARTBOOK_CATEGORIES, name="artbook_category", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="true"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_artbook_slug"),
    )
    op.create_index(
        "idx_artbooks_created_at",
        "artbooks",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_artbooks_author_id", "artbooks", ["author_id"])
    op.create_index("idx_artbooks_category", "artbooks", ["category"])

    op.create_table(
        "pages",
        _id(),
        sa.Column("artbook_id", sa.UUID(), nullable=False),
        sa.Column("page_number", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("picture_url", sa.Text(), nullable=True),
        sa.Column("audio_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["artbook_id"], ["artbooks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("artbook_id", "page_number", name="uq_page_number"),
        sa.CheckConstraint("page_number BETWEEN 1 AND 10", name="page_number_range"),
    )
    op.create_index("idx_pages_artbook_id", "pages", ["artbook_id"])

    op.create_table(
        "posts",
        _id(),
        sa.Column("artbook_id", sa.UUID(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["artbook_id"], ["artbooks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("artbook_id", name="uq_post_artbook"),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
    )

    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.String(1000), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Serves top-level pagination and reply listing in created_at order
    op.create_index(
        "idx_comments_post_parent_created",
        "comments",
        ["post_id", "parent_id", "created_at"],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    op.create_table(
        "likes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "post_id", name="unique_post_like"),
    )
    op.create_index("idx_likes_post_id", "likes", ["post_id"])

    op.create_table(
        "comment_likes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "comment_id", name="unique_comment_like"),
    )
    op.create_index("idx_comment_likes_comment_id", "comment_likes", ["comment_id"])

    op.create_table(
        "reports",
        _id(),
        sa.Column("artbook_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(
                *REPORT_CATEGORIES, name="report_category", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(*REPORT_STATUSES, name="report_status", create_type=False),
            nullable=False,
            server_default="PENDING",
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["artbook_id"], ["artbooks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reporter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("reporter_id", "artbook_id", name="unique_report"),
    )
    op.create_index("idx_reports_artbook_id", "reports", ["artbook_id"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "reports",
        "comment_likes",
        "likes",
        "comments",
        "posts",
        "pages",
        "artbooks",
        "users",
    ):
        op.drop_table(table)

    for enum_name in ("report_status", "report_category", "artbook_category"):
        op.execute(f"DROP TYPE IF EXISTS {enum_name}")
