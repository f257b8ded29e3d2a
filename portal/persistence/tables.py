"""SQLAlchemy table definitions for the department portal.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

role_enum = postgresql.ENUM(
    "student", "alumnus", "admin", "super_admin", name="user_role", create_type=False
)
approval_status_enum = postgresql.ENUM(
    "pending", "approved", "rejected", name="approval_status", create_type=False
)
like_target_type_enum = postgresql.ENUM(
    "blog_post", "comment", name="like_target_type", create_type=False
)
poll_status_enum = postgresql.ENUM(
    "active", "closed", name="poll_status", create_type=False
)
event_type_enum = postgresql.ENUM(
    "workshop",
    "seminar",
    "conference",
    "social",
    "academic",
    name="event_type",
    create_type=False,
)
registration_status_enum = postgresql.ENUM(
    "registered", "attended", "cancelled", name="registration_status", create_type=False
)

# ============================================================================
# USERS TABLE (credential store and profile)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("profile_image_url", Text, nullable=True),
    Column("matric_number", String(50), nullable=True, unique=True),
    Column("gender", String(20), nullable=True),
    Column("location", String(20), nullable=True),
    Column("address", Text, nullable=True),
    Column("phone_number", String(30), nullable=True),
    Column("level", String(20), nullable=True),
    Column("occupation", String(200), nullable=True),
    Column("role", role_enum, nullable=False, server_default="student"),
    Column(
        "approval_status", approval_status_enum, nullable=False, server_default="pending"
    ),
    Column("profile_completion", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_approval_status", users_table.c.approval_status)

# ============================================================================
# BLOG POSTS TABLE
# ============================================================================
blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("excerpt", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column("category", String(100), nullable=False, server_default="general"),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("read_time", Integer, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("image_urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="blog_posts_likes_non_negative"),
    CheckConstraint("views >= 0", name="blog_posts_views_non_negative"),
)

Index("idx_blog_posts_created_at", blog_posts_table.c.created_at.desc())
Index("idx_blog_posts_author_id", blog_posts_table.c.author_id)
Index("idx_blog_posts_published", blog_posts_table.c.published)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "blog_post_id",
        UUID,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="comments_likes_non_negative"),
)

Index("idx_comments_blog_post_id", comments_table.c.blog_post_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# LIKES TABLE (polymorphic: blog posts or comments)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("target_type", like_target_type_enum, nullable=False),
    Column("target_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="uq_user_like"),
)

Index("idx_likes_target", likes_table.c.target_type, likes_table.c.target_id)

# ============================================================================
# BLOG VIEWS TABLE
# ============================================================================
blog_views_table = Table(
    "blog_views",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "blog_post_id",
        UUID,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "blog_post_id", name="uq_user_blog_view"),
)

Index("idx_blog_views_blog_post_id", blog_views_table.c.blog_post_id)

# ============================================================================
# POLLS TABLES
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("question", String(500), nullable=False),
    Column("target_levels", ARRAY(String), nullable=False, server_default="{}"),
    Column("allow_multiple_votes", Boolean, nullable=False, server_default="false"),
    Column("status", poll_status_enum, nullable=False, server_default="active"),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("closed_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_polls_status", polls_table.c.status)

poll_options_table = Table(
    "poll_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("text", String(200), nullable=False),
    Column("position", Integer, nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    CheckConstraint("votes >= 0", name="poll_options_votes_non_negative"),
)

Index("idx_poll_options_poll_id", poll_options_table.c.poll_id)

poll_votes_table = Table(
    "poll_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column(
        "option_id",
        UUID,
        ForeignKey("poll_options.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("exclusive", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "user_id", "option_id", name="uq_poll_vote_option"),
)

# Single-vote polls: at most one exclusive vote per (poll, user)
Index(
    "idx_poll_votes_unique_exclusive",
    poll_votes_table.c.poll_id,
    poll_votes_table.c.user_id,
    unique=True,
    postgresql_where=poll_votes_table.c.exclusive.is_(True),
)
Index("idx_poll_votes_user_id", poll_votes_table.c.user_id)

# ============================================================================
# LEARNING RESOURCES TABLE
# ============================================================================
learning_resources_table = Table(
    "learning_resources",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "uploaded_by_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("type", String(20), nullable=False),
    Column("category", String(100), nullable=False, server_default="general"),
    Column("file_url", Text, nullable=False),
    Column("file_name", String(255), nullable=True),
    Column("file_size", Integer, nullable=True),
    Column("difficulty", String(10), nullable=True),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column("downloads", Integer, nullable=False, server_default="0"),
    Column("rating", Integer, nullable=False, server_default="0"),
    Column("rating_count", Integer, nullable=False, server_default="0"),
    Column("preview_available", Boolean, nullable=False, server_default="false"),
    Column("thumbnail_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("downloads >= 0", name="learning_resources_downloads_non_negative"),
    CheckConstraint("rating BETWEEN 0 AND 50", name="learning_resources_rating_range"),
)

Index("idx_learning_resources_category", learning_resources_table.c.category)

resource_downloads_table = Table(
    "resource_downloads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "resource_id",
        UUID,
        ForeignKey("learning_resources.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_resource_downloads_resource_id", resource_downloads_table.c.resource_id)
Index("idx_resource_downloads_user_id", resource_downloads_table.c.user_id)

resource_ratings_table = Table(
    "resource_ratings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "resource_id",
        UUID,
        ForeignKey("learning_resources.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("rating", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "resource_id", name="uq_user_resource_rating"),
    CheckConstraint("rating BETWEEN 1 AND 5", name="resource_ratings_rating_range"),
)

Index("idx_resource_ratings_resource_id", resource_ratings_table.c.resource_id)

# ============================================================================
# EVENTS TABLES
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "organizer_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("date", TIMESTAMP(timezone=True), nullable=False),
    Column("time", String(50), nullable=False),
    Column("location", String(300), nullable=False),
    Column("type", event_type_enum, nullable=False),
    Column("capacity", Integer, nullable=False),
    Column("price", Integer, nullable=False, server_default="0"),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column("image_url", Text, nullable=True),
    Column("image_urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("capacity > 0", name="events_capacity_positive"),
    CheckConstraint("price >= 0", name="events_price_non_negative"),
)

Index("idx_events_date", events_table.c.date.desc())

event_registrations_table = Table(
    "event_registrations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "event_id", UUID, ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status", registration_status_enum, nullable=False, server_default="registered"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "event_id", name="uq_user_event_registration"),
)

Index("idx_event_registrations_event_id", event_registrations_table.c.event_id)
