"""Initial schema — categories and notes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

notes.category_id is ON DELETE SET NULL: deleting a category keeps its notes
and unlinks them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("color", sa.Text, nullable=False, server_default="#000000"),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("is_favorite", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_notes_category_id", "notes", ["category_id"])


def downgrade() -> None:
    op.drop_index("ix_notes_category_id", table_name="notes")
    op.drop_table("notes")
    op.drop_table("categories")
