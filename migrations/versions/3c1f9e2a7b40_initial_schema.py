"""initial_schema

Create the forum schema:
- Posts (optional category, guest or registered author address)
- Comments (threaded through parent_id, replies survive a removed parent)

Revision ID: 3c1f9e2a7b40
Revises:
Create Date: 2026-10-19 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9e2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE post_status AS ENUM ('draft', 'published', 'hidden', 'deleted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_status AS ENUM ('published', 'hidden', 'deleted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(300), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=True),
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("category_id", sa.String(255), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
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
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("votes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
        sa.CheckConstraint("views_count >= 0", name="views_count_non_negative"),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")], unique=False
    )
    op.create_index("idx_posts_status", "posts", ["status"], unique=False)
    op.create_index("idx_posts_category_id", "posts", ["category_id"], unique=False)
    op.create_index("idx_posts_author_email", "posts", ["author_email"], unique=False)

    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=True),
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("votes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "status",
            postgresql.ENUM(
                "published",
                "hidden",
                "deleted",
                name="comment_status",
                create_type=False,
            ),
            nullable=False,
            server_default="published",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_post_id_created_at",
        "comments",
        ["post_id", "created_at"],
        unique=False,
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"], unique=False)
    op.create_index("idx_comments_status", "comments", ["status"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_status", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_post_id_created_at", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_posts_author_email", table_name="posts")
    op.drop_index("idx_posts_category_id", table_name="posts")
    op.drop_index("idx_posts_status", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")

    op.execute("DROP TYPE IF EXISTS comment_status")
    op.execute("DROP TYPE IF EXISTS post_status")
