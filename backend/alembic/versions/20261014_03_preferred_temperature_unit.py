"""add preferred temperature unit for users

Revision ID: 20261014_03
Revises: 20261013_02
Create Date: 2026-10-14 08:15:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261014_03"
down_revision: Union[str, None] = "20261013_02"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "users",
        sa.Column("preferred_temp_unit", sa.String(length=20), nullable=False, server_default="fahrenheit"),
    )


def downgrade() -> None:
    with op.batch_alter_table("users") as batch_op:
        batch_op.drop_column("preferred_temp_unit")
