"""create friendships table

Revision ID: 392349af8917
Revises: 3854834d3c61
Create Date: 2026-10-12 16:46:54.687375

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy import func

# revision identifiers, used by Alembic.
revision: str = '392349af8917'
down_revision: Union[str, Sequence[str], None] = '3854834d3c61'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "friendships",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("user_a", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_b", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("pair_low", sa.Integer, nullable=False),
        sa.Column("pair_high", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("pair_low", "pair_high", name="uq_friendships_pair"),
        sa.CheckConstraint("user_a <> user_b", name="ck_friendships_not_self"),
        sa.CheckConstraint("status IN ('pending', 'accepted')", name="ck_friendships_status"),
    )
    op.create_index("ix_friendships_user_b_status", "friendships", ["user_b", "status"])


def downgrade() -> None:
    op.drop_index("ix_friendships_user_b_status", table_name="friendships")
    op.drop_table("friendships")
