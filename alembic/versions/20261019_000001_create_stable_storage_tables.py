"""Create stable storage tables

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19

stable_entries holds the encoded records of every entity table, partitioned
by memory_id. stable_cells holds scalar cells such as the id counter.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "stable_entries",
        sa.Column("memory_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("key", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("value", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("memory_id", "key", name="pk_stable_entries"),
    )
    op.create_table(
        "stable_cells",
        sa.Column("memory_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("value", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("memory_id", name="pk_stable_cells"),
    )


def downgrade() -> None:
    op.drop_table("stable_cells")
    op.drop_table("stable_entries")
