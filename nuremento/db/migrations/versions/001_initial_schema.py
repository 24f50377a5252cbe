"""Create the initial schema.

Revision ID: 001
Revises:
Create Date: 2025-01-06

Tables: memories, lake_notes, daily_pick_state, time_capsules
"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create all Nuremento tables."""
    # memories table
    op.create_table(
        "memories",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("mood", sa.String(60)),
        sa.Column("location", sa.String(120)),
        sa.Column("occurred_on", sa.Date),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()")),
    )
    # Serves both the picker order and the recent list
    op.create_index("idx_memories_owner_created", "memories", ["owner_id", "created_at", "id"])

    # lake_notes table
    op.create_table(
        "lake_notes",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()")),
    )
    op.create_index("idx_lake_notes_owner_created", "lake_notes", ["owner_id", "created_at", "id"])

    # daily_pick_state table: one row per owner
    op.create_table(
        "daily_pick_state",
        sa.Column("owner_id", sa.String(255), primary_key=True),
        sa.Column("last_served_on", sa.Date, nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()")),
    )

    # time_capsules table
    op.create_table(
        "time_capsules",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("open_on", sa.Date, nullable=False),
        sa.Column("opened_at", sa.TIMESTAMP(timezone=True)),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()")),
    )
    op.create_index("idx_time_capsules_owner_open_on", "time_capsules", ["owner_id", "open_on"])


def downgrade() -> None:
    """Drop all Nuremento tables."""
    op.drop_index("idx_time_capsules_owner_open_on", table_name="time_capsules")
    op.drop_table("time_capsules")

    op.drop_table("daily_pick_state")

    op.drop_index("idx_lake_notes_owner_created", table_name="lake_notes")
    op.drop_table("lake_notes")

    op.drop_index("idx_memories_owner_created", table_name="memories")
    op.drop_table("memories")
