"""soft-delete flag for fermentation profiles

Revision ID: 20261013_02
Revises: 20261012_01
Create Date: 2026-10-13 10:30:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261013_02"
down_revision: Union[str, None] = "20261012_01"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("fermentation_profiles") as batch_op:
        batch_op.add_column(sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")))
        batch_op.create_index(batch_op.f("ix_fermentation_profiles_is_active"), ["is_active"], unique=False)


def downgrade() -> None:
    with op.batch_alter_table("fermentation_profiles") as batch_op:
        batch_op.drop_index(batch_op.f("ix_fermentation_profiles_is_active"))
        batch_op.drop_column("is_active")
