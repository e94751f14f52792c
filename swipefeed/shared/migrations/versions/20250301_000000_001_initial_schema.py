# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

This migration creates all database tables for SwipeFeed.

Tables created:
- genre_categories: Top-level genre grouping (reference data)
- genres: Selectable tags, one category each (reference data)
- listings: Submitted videos and their moderation state
- listing_genres: Junction table for listings and genres

Enums created:
- moderation_status: pending, approved, rejected
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


moderation_status_enum = postgresql.ENUM(
    "pending",
    "approved",
    "rejected",
    name="moderation_status",
    create_type=False,
)


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.execute("CREATE TYPE moderation_status AS ENUM ('pending', 'approved', 'rejected')")

    # Create genre_categories table
    op.create_table(
        "genre_categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id", name="pk_genre_categories"),
    )
    op.create_index("ix_genre_categories_sort_order", "genre_categories", ["sort_order"])

    # Create genres table
    op.create_table(
        "genres",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("genre_category_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id", name="pk_genres"),
        sa.ForeignKeyConstraint(
            ["genre_category_id"],
            ["genre_categories.id"],
            name="fk_genres_genre_category_id_genre_categories",
            ondelete="RESTRICT",
        ),
    )
    op.create_index("ix_genres_genre_category_id", "genres", ["genre_category_id"])
    op.create_index("ix_genres_is_active", "genres", ["is_active"])

    # Create listings table
    op.create_table(
        "listings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("creator_name", sa.Text(), nullable=False),
        sa.Column("creator_contact", sa.Text(), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("source_url", sa.Text(), nullable=True),
        sa.Column("genre_label", sa.Text(), nullable=True),
        sa.Column("memo", sa.Text(), nullable=True),
        sa.Column(
            "status",
            moderation_status_enum,
            nullable=False,
            server_default="pending",
        ),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_listings"),
        # A rejection reason only exists while the listing is rejected
        sa.CheckConstraint(
            "rejection_reason IS NULL OR status = 'rejected'",
            name="ck_listings_rejection_reason_only_when_rejected",
        ),
    )
    op.create_index("ix_listings_status", "listings", ["status"])
    op.create_index("ix_listings_created_at", "listings", ["created_at"])

    # Create listing_genres table (junction table)
    op.create_table(
        "listing_genres",
        sa.Column("listing_id", sa.Uuid(), nullable=False),
        sa.Column("genre_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("listing_id", "genre_id", name="pk_listing_genres"),
        sa.ForeignKeyConstraint(
            ["listing_id"],
            ["listings.id"],
            name="fk_listing_genres_listing_id_listings",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["genre_id"],
            ["genres.id"],
            name="fk_listing_genres_genre_id_genres",
            ondelete="RESTRICT",
        ),
    )
    op.create_index("ix_listing_genres_genre_id", "listing_genres", ["genre_id"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("listing_genres")
    op.drop_table("listings")
    op.drop_table("genres")
    op.drop_table("genre_categories")

    op.execute("DROP TYPE IF EXISTS moderation_status")
