"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core queries.
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
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# IDs travel through the application as plain strings
ID = UUID(as_uuid=False)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", ID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(300), nullable=True),
    Column("author_name", String(255), nullable=True),
    Column("author_email", String(255), nullable=True),
    Column("category_id", String(255), nullable=True),
    Column(
        "status",
        Enum(
            "draft",
            "published",
            "hidden",
            "deleted",
            name="post_status",
            create_type=False,
        ),
        nullable=False,
        server_default="published",
    ),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("votes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
    CheckConstraint("views_count >= 0", name="views_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_status", posts_table.c.status)
Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_author_email", posts_table.c.author_email)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", ID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", ID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    # No cascade: replies outlive a removed parent and render as top-level
    Column(
        "parent_id", ID, ForeignKey("comments.id", ondelete="SET NULL"), nullable=True
    ),
    Column("author_name", String(255), nullable=True),
    Column("author_email", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("votes_count", Integer, nullable=False, server_default="0"),
    Column(
        "status",
        Enum(
            "published",
            "hidden",
            "deleted",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="published",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_status", comments_table.c.status)
