"""initial_schema

Create the schema for the department portal:
- Users (credential store, profile, role and approval status)
- Blog posts with cached like/view counters
- Comments (threaded through parent_comment_id)
- Likes (one per user per blog post or comment)
- Blog views (one per user per blog post)
- Polls, options and votes (single- and multi-vote polls)
- Learning resources

Revision ID: 3f6c2a9d1b7e
Revises:
Create Date: 2026-10-18 09:12:44.510236

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f6c2a9d1b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('student', 'alumnus', 'admin', 'super_admin');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE approval_status AS ENUM ('pending', 'approved', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE like_target_type AS ENUM ('blog_post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE poll_status AS ENUM ('active', 'closed');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    role = postgresql.ENUM(name="user_role", create_type=False)
    approval_status = postgresql.ENUM(name="approval_status", create_type=False)
    like_target_type = postgresql.ENUM(name="like_target_type", create_type=False)
    poll_status = postgresql.ENUM(name="poll_status", create_type=False)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("profile_image_url", sa.Text(), nullable=True),
        sa.Column("matric_number", sa.String(50), nullable=True),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("location", sa.String(20), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone_number", sa.String(30), nullable=True),
        sa.Column("level", sa.String(20), nullable=True),
        sa.Column("occupation", sa.String(200), nullable=True),
        sa.Column("role", role, nullable=False, server_default="student"),
        sa.Column(
            "approval_status", approval_status, nullable=False, server_default="pending"
        ),
        sa.Column("profile_completion", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        # Unique constraints back the registration pre-checks under concurrency
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.UniqueConstraint("matric_number", name="users_matric_number_key"),
    )
    op.create_index("idx_users_approval_status", "users", ["approval_status"])

    # ========================================================================
    # BLOG_POSTS table
    # ========================================================================
    op.create_table(
        "blog_posts",
        _uuid_pk(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=False, server_default="general"),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        sa.Column("published", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("read_time", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "image_urls", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="blog_posts_likes_non_negative"),
        sa.CheckConstraint("views >= 0", name="blog_posts_views_non_negative"),
    )
    op.create_index(
        "idx_blog_posts_created_at", "blog_posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_blog_posts_author_id", "blog_posts", ["author_id"])
    op.create_index("idx_blog_posts_published", "blog_posts", ["published"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("blog_post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["blog_post_id"], ["blog_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="comments_likes_non_negative"),
    )
    op.create_index("idx_comments_blog_post_id", "comments", ["blog_post_id"])
    op.create_index("idx_comments_parent_comment_id", "comments", ["parent_comment_id"])

    # ========================================================================
    # LIKES table (polymorphic target, no FK on target_id)
    # ========================================================================
    op.create_table(
        "likes",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("target_type", like_target_type, nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "target_type", "target_id", name="uq_user_like"),
    )
    op.create_index("idx_likes_target", "likes", ["target_type", "target_id"])

    # ========================================================================
    # BLOG_VIEWS table
    # ========================================================================
    op.create_table(
        "blog_views",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("blog_post_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["blog_post_id"], ["blog_posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "blog_post_id", name="uq_user_blog_view"),
    )
    op.create_index("idx_blog_views_blog_post_id", "blog_views", ["blog_post_id"])

    # ========================================================================
    # POLLS, POLL_OPTIONS, POLL_VOTES tables
    # ========================================================================
    op.create_table(
        "polls",
        _uuid_pk(),
        sa.Column("question", sa.String(500), nullable=False),
        sa.Column(
            "target_levels",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "allow_multiple_votes", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("status", poll_status, nullable=False, server_default="active"),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("closed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_polls_status", "polls", ["status"])

    op.create_table(
        "poll_options",
        _uuid_pk(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.String(200), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("votes >= 0", name="poll_options_votes_non_negative"),
    )
    op.create_index("idx_poll_options_poll_id", "poll_options", ["poll_id"])

    op.create_table(
        "poll_votes",
        _uuid_pk(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("option_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("exclusive", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["option_id"], ["poll_options.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "poll_id", "user_id", "option_id", name="uq_poll_vote_option"
        ),
    )
    # Single-vote polls: at most one exclusive vote per (poll, user)
    op.create_index(
        "idx_poll_votes_unique_exclusive",
        "poll_votes",
        ["poll_id", "user_id"],
        unique=True,
        postgresql_where=sa.text("exclusive"),
    )
    op.create_index("idx_poll_votes_user_id", "poll_votes", ["user_id"])

    # ========================================================================
    # LEARNING_RESOURCES table
    # ========================================================================
    op.create_table(
        "learning_resources",
        _uuid_pk(),
        sa.Column("uploaded_by_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("category", sa.String(100), nullable=False, server_default="general"),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=True),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column("difficulty", sa.String(10), nullable=True),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        sa.Column("downloads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "preview_available", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["uploaded_by_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_learning_resources_category", "learning_resources", ["category"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("learning_resources")
    op.drop_table("poll_votes")
    op.drop_table("poll_options")
    op.drop_table("polls")
    op.drop_table("blog_views")
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("blog_posts")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS poll_status")
    op.execute("DROP TYPE IF EXISTS like_target_type")
    op.execute("DROP TYPE IF EXISTS approval_status")
    op.execute("DROP TYPE IF EXISTS user_role")
