"""taste profiles and lessons learned

Revision ID: 20261016_04
Revises: 20261014_03
Create Date: 2026-10-16 19:40:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261016_04"
down_revision: Union[str, None] = "20261014_03"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column("batches", sa.Column("lessons_learned", sa.Text(), nullable=True))

    op.create_table(
        "taste_profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("batch_id", sa.Integer(), nullable=False),
        sa.Column("profile_text", sa.Text(), nullable=False),
        sa.Column("tasted_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["batch_id"], ["batches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_taste_profiles_id"), "taste_profiles", ["id"], unique=False)
    op.create_index("ix_taste_profiles_batch_tasted", "taste_profiles", ["batch_id", "tasted_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_taste_profiles_batch_tasted", table_name="taste_profiles")
    op.drop_index(op.f("ix_taste_profiles_id"), table_name="taste_profiles")
    op.drop_table("taste_profiles")

    with op.batch_alter_table("batches") as batch_op:
        batch_op.drop_column("lessons_learned")
