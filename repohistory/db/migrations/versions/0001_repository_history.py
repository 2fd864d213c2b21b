"""create repository_history table

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "repository_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("key", sa.String(length=128), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("path", sa.String(length=4096), nullable=False),
        sa.Column("category", sa.String(length=256), nullable=True),
    )
    op.create_index("ix_repository_history_key_position", "repository_history", ["key", "position"])


def downgrade() -> None:
    op.drop_index("ix_repository_history_key_position", table_name="repository_history")
    op.drop_table("repository_history")
