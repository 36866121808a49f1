"""initial schema

Revision ID: 20261012_01
Revises: 
Create Date: 2026-10-12 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261012_01"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_PROFILES = [
    ("Pickles", "vegetable", 3, 7, 65.0, 75.0, "Salt brine fermented pickles - cucumbers, carrots, or other vegetables"),
    ("Kombucha", "beverage", 7, 14, 68.0, 78.0, "SCOBY-based fermented tea with first and second fermentation"),
    ("Kimchi", "vegetable", 3, 5, 65.0, 75.0, "Korean fermented cabbage with chili paste and aromatics"),
    ("Sauerkraut", "vegetable", 14, 28, 65.0, 72.0, "Dry salt fermented cabbage - traditional German style"),
    ("Sourdough Starter", "bread", 5, 7, 70.0, 80.0, "Wild yeast and bacteria culture for bread making"),
    ("Kefir (Milk)", "dairy", 1, 1, 68.0, 76.0, "Kefir grains fermented milk - 12-24 hour cycle"),
    ("Water Kefir", "beverage", 1, 3, 68.0, 76.0, "Water kefir grains fermented sugar water with fruit"),
]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)

    profiles = op.create_table(
        "fermentation_profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("type", sa.String(length=40), nullable=False),
        sa.Column("min_days", sa.Integer(), nullable=False),
        sa.Column("max_days", sa.Integer(), nullable=False),
        sa.Column("temp_min", sa.Float(), nullable=False),
        sa.Column("temp_max", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_fermentation_profiles_id"), "fermentation_profiles", ["id"], unique=False)

    op.create_table(
        "batches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("target_end_date", sa.DateTime(), nullable=True),
        sa.Column("actual_end_date", sa.DateTime(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("success_rating", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("ingredients", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["profile_id"], ["fermentation_profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_batches_id"), "batches", ["id"], unique=False)
    op.create_index(op.f("ix_batches_owner_id"), "batches", ["owner_id"], unique=False)
    op.create_index(op.f("ix_batches_profile_id"), "batches", ["profile_id"], unique=False)
    op.create_index("ix_batches_owner_status", "batches", ["owner_id", "status"], unique=False)

    op.create_table(
        "temperature_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("batch_id", sa.Integer(), nullable=False),
        sa.Column("recorded_at", sa.DateTime(), nullable=False),
        sa.Column("temperature", sa.Float(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["batch_id"], ["batches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_temperature_logs_id"), "temperature_logs", ["id"], unique=False)
    op.create_index("ix_temperature_logs_batch_time", "temperature_logs", ["batch_id", "recorded_at"], unique=False)

    op.create_table(
        "batch_photos",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("batch_id", sa.Integer(), nullable=False),
        sa.Column("file_path", sa.String(length=500), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("taken_at", sa.DateTime(), nullable=False),
        sa.Column("stage", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["batch_id"], ["batches.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_batch_photos_id"), "batch_photos", ["id"], unique=False)
    op.create_index(op.f("ix_batch_photos_batch_id"), "batch_photos", ["batch_id"], unique=False)

    op.bulk_insert(
        profiles,
        [
            {
                "name": name,
                "type": profile_type,
                "min_days": min_days,
                "max_days": max_days,
                "temp_min": temp_min,
                "temp_max": temp_max,
                "description": description,
            }
            for name, profile_type, min_days, max_days, temp_min, temp_max, description in DEFAULT_PROFILES
        ],
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_batch_photos_batch_id"), table_name="batch_photos")
    op.drop_index(op.f("ix_batch_photos_id"), table_name="batch_photos")
    op.drop_table("batch_photos")

    op.drop_index("ix_temperature_logs_batch_time", table_name="temperature_logs")
    op.drop_index(op.f("ix_temperature_logs_id"), table_name="temperature_logs")
    op.drop_table("temperature_logs")

    op.drop_index("ix_batches_owner_status", table_name="batches")
    op.drop_index(op.f("ix_batches_profile_id"), table_name="batches")
    op.drop_index(op.f("ix_batches_owner_id"), table_name="batches")
    op.drop_index(op.f("ix_batches_id"), table_name="batches")
    op.drop_table("batches")

    op.drop_index(op.f("ix_fermentation_profiles_id"), table_name="fermentation_profiles")
    op.drop_table("fermentation_profiles")

    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
