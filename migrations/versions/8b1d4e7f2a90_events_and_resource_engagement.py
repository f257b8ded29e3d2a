"""events_and_resource_engagement

- Resource download ledger and per-user resource ratings
- Rating average (x 10) and rating count columns on learning resources
- Events and event registrations (one per user per event)

Revision ID: 8b1d4e7f2a90
Revises: 3f6c2a9d1b7e
Create Date: 2026-10-18 15:40:02.118904

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8b1d4e7f2a90"
down_revision: Union[str, Sequence[str], None] = "3f6c2a9d1b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE event_type AS ENUM (
                'workshop', 'seminar', 'conference', 'social', 'academic'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE registration_status AS ENUM ('registered', 'attended', 'cancelled');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    event_type = postgresql.ENUM(name="event_type", create_type=False)
    registration_status = postgresql.ENUM(name="registration_status", create_type=False)

    # Learning resource engagement
    op.add_column(
        "learning_resources",
        sa.Column("rating", sa.Integer(), nullable=False, server_default="0"),
    )
    op.add_column(
        "learning_resources",
        sa.Column("rating_count", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_check_constraint(
        "learning_resources_downloads_non_negative",
        "learning_resources",
        "downloads >= 0",
    )
    op.create_check_constraint(
        "learning_resources_rating_range",
        "learning_resources",
        "rating BETWEEN 0 AND 50",
    )

    op.create_table(
        "resource_downloads",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("resource_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["resource_id"], ["learning_resources.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_resource_downloads_resource_id", "resource_downloads", ["resource_id"]
    )
    op.create_index("idx_resource_downloads_user_id", "resource_downloads", ["user_id"])

    op.create_table(
        "resource_ratings",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("resource_id", sa.UUID(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["resource_id"], ["learning_resources.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "resource_id", name="uq_user_resource_rating"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="resource_ratings_rating_range"),
    )
    op.create_index(
        "idx_resource_ratings_resource_id", "resource_ratings", ["resource_id"]
    )

    # Events
    op.create_table(
        "events",
        _uuid_pk(),
        sa.Column("organizer_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("time", sa.String(50), nullable=False),
        sa.Column("location", sa.String(300), nullable=False),
        sa.Column("type", event_type, nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "image_urls", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(["organizer_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("capacity > 0", name="events_capacity_positive"),
        sa.CheckConstraint("price >= 0", name="events_price_non_negative"),
    )
    op.create_index("idx_events_date", "events", [sa.text("date DESC")])

    op.create_table(
        "event_registrations",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column(
            "status", registration_status, nullable=False, server_default="registered"
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "event_id", name="uq_user_event_registration"),
    )
    op.create_index(
        "idx_event_registrations_event_id", "event_registrations", ["event_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("event_registrations")
    op.drop_table("events")
    op.drop_table("resource_ratings")
    op.drop_table("resource_downloads")

    op.drop_constraint(
        "learning_resources_rating_range", "learning_resources", type_="check"
    )
    op.drop_constraint(
        "learning_resources_downloads_non_negative", "learning_resources", type_="check"
    )
    op.drop_column("learning_resources", "rating_count")
    op.drop_column("learning_resources", "rating")

    op.execute("DROP TYPE IF EXISTS registration_status")
    op.execute("DROP TYPE IF EXISTS event_type")
