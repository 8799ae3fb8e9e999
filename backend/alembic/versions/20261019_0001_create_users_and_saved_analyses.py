# File: backend/alembic/versions/20261019_0001_create_users_and_saved_analyses.py
# Version: v0.1.0
"""
Create tables: users, saved_analyses

Idempotent for SQLite/local dev: skips tables that already exist (e.g. created
by the startup schema auto-heal).

Revision ID: 0001_users_and_saved_analyses
Revises: None
Create Date: 2026-10-19

Run:
  alembic -c backend/alembic.ini upgrade head
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_users_and_saved_analyses"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    tables = set(sa.inspect(op.get_bind()).get_table_names())

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("username", sa.String(length=120), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False),
        )
        op.create_index("ix_users_username", "users", ["username"], unique=True)

    if "saved_analyses" not in tables:
        op.create_table(
            "saved_analyses",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("archive_id", sa.String(length=12), nullable=False, unique=True),
            sa.Column("status", sa.String(length=32), nullable=False, server_default="Completed"),
            sa.Column("original_sequence", sa.Text(), nullable=False),
            sa.Column("sequence_type", sa.String(length=16), nullable=False),
            sa.Column("sequence_length", sa.Integer(), nullable=False),
            sa.Column("gc_content", sa.Float(), nullable=False),
            sa.Column("rna_transcript", sa.Text(), nullable=False),
            sa.Column("protein_sequence", sa.Text(), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        )
        op.create_index("ix_saved_analyses_user_id", "saved_analyses", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_saved_analyses_user_id", table_name="saved_analyses")
    op.drop_table("saved_analyses")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
