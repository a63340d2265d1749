"""create policies table

Revision ID: 002
Revises: 001
Create Date: 2026-10-05 10:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "policies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("policy_number", sa.String(20), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("coverage_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("premium", sa.Numeric(12, 2), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "coverage_amount >= 1000", name="ck_policies_coverage_amount_minimum"
        ),
        sa.CheckConstraint("premium >= 100", name="ck_policies_premium_minimum"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_policies_id", "policies", ["id"], unique=False)
    op.create_index("ix_policies_client_id", "policies", ["client_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_policies_client_id", table_name="policies")
    op.drop_index("ix_policies_id", table_name="policies")
    op.drop_table("policies")
