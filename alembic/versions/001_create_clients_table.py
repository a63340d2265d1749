"""create clients table

Revision ID: 001
Revises:
Create Date: 2026-10-05 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("contact_information", sa.String(15), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_clients_id", "clients", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_clients_id", table_name="clients")
    op.drop_table("clients")
