"""SQLAlchemy table definitions for Artbook.

These Core tables are mapped to domain models by hand (see mappers.py).
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the auth service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# ARTBOOKS TABLE
# ============================================================================
artbooks_table = Table(
    "artbooks",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("cover_photo", Text, nullable=True),
    Column(
        "category",
        Enum(
            "ADVENTURE",
            "HORROR",
            "ACTION",
            "ROMANTIC",
            "FIGURE",
            name="artbook_category",
            create_type=False,
        ),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_artbooks_created_at", artbooks_table.c.created_at.desc())
Index("idx_artbooks_author_id", artbooks_table.c.author_id)
Index("idx_artbooks_category", artbooks_table.c.category)

# ============================================================================
# PAGES TABLE
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "artbook_id",
        UUID,
        ForeignKey("artbooks.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("page_number", Integer, nullable=False),
    Column("content", Text, nullable=False),
    Column("picture_url", Text, nullable=True),
    Column("audio_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("artbook_id", "page_number", name="uq_page_number"),
    CheckConstraint("page_number BETWEEN 1 AND 10", name="page_number_range"),
)

Index("idx_pages_artbook_id", pages_table.c.artbook_id)

# ============================================================================
# POSTS TABLE (one engagement post per artbook)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "artbook_id",
        UUID,
        ForeignKey("artbooks.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", String(1000), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_parent_created",
    comments_table.c.post_id,
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# LIKES TABLE (post likes)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="unique_post_like"),
)

Index("idx_likes_post_id", likes_table.c.post_id)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="unique_comment_like"),
)

Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "artbook_id",
        UUID,
        ForeignKey("artbooks.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "reporter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "category",
        Enum(
            "INAPPROPRIATE_CONTENT",
            "COPYRIGHT_VIOLATION",
            "SPAM_MISLEADING",
            "HARASSMENT_BULLYING",
            "VIOLENCE_GORE",
            "ADULT_CONTENT",
            "OTHER",
            name="report_category",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("description", String(500), nullable=True),
    Column(
        "status",
        Enum(
            "PENDING",
            "REVIEWED",
            "RESOLVED",
            "DISMISSED",
            name="report_status",
            create_type=False,
        ),
        nullable=False,
        server_default="PENDING",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("reporter_id", "artbook_id", name="unique_report"),
)

Index("idx_reports_artbook_id", reports_table.c.artbook_id)
