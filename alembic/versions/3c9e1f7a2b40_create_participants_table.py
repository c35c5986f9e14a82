"""create_participants_table

Revision ID: 3c9e1f7a2b40
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c9e1f7a2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "participants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("participant_id", sa.String(), nullable=True),
        sa.Column("group", sa.String(), nullable=True),
        sa.Column("unique_code", sa.String(), nullable=True),
        sa.Column("page_times", sa.JSON(), nullable=True),
        sa.Column("bid_history", sa.JSON(), nullable=True),
        sa.Column("survey_responses", sa.JSON(), nullable=True),
        sa.Column("risk_responses", sa.JSON(), nullable=True),
        sa.Column("immediate_purchase", sa.Boolean(), nullable=True),
        sa.Column("final_winner", sa.Boolean(), nullable=True),
        sa.Column("auction_profit", sa.Float(), nullable=True),
        sa.Column("lottery_bonus", sa.Float(), nullable=True),
        sa.Column("alipay", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_participants_id"), "participants", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_participants_id"), table_name="participants")
    op.drop_table("participants")
