from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from raugupatis.core.database import Base
from raugupatis.core.timeutils import utcnow

if TYPE_CHECKING:
    from raugupatis.models.profile import FermentationProfile
    from raugupatis.models.user import User


class Batch(Base):
    __tablename__ = "batches"
    __table_args__ = (Index("ix_batches_owner_status", "owner_id", "status"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    profile_id: Mapped[int] = mapped_column(ForeignKey("fermentation_profiles.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    target_end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    actual_end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    success_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    ingredients: Mapped[str | None] = mapped_column(Text, nullable=True)
    lessons_learned: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    owner: Mapped[User] = relationship(back_populates="batches")
    profile: Mapped[FermentationProfile] = relationship(back_populates="batches")
    temperature_logs: Mapped[list[TemperatureLog]] = relationship(
        back_populates="batch",
        cascade="all, delete-orphan",
    )
    photos: Mapped[list[Photo]] = relationship(
        back_populates="batch",
        cascade="all, delete-orphan",
    )
    taste_profiles: Mapped[list[TasteProfile]] = relationship(
        back_populates="batch",
        cascade="all, delete-orphan",
    )

    @property
    def profile_name(self) -> str | None:
        return self.profile.name if self.profile else None

    @property
    def profile_type(self) -> str | None:
        return self.profile.type if self.profile else None


class TemperatureLog(Base):
    __tablename__ = "temperature_logs"
    __table_args__ = (Index("ix_temperature_logs_batch_time", "batch_id", "recorded_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    batch_id: Mapped[int] = mapped_column(ForeignKey("batches.id", ondelete="CASCADE"), nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    batch: Mapped[Batch] = relationship(back_populates="temperature_logs")


class Photo(Base):
    __tablename__ = "batch_photos"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    batch_id: Mapped[int] = mapped_column(ForeignKey("batches.id", ondelete="CASCADE"), nullable=False, index=True)
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)
    taken_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    stage: Mapped[str] = mapped_column(String(20), nullable=False, default="progress")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    batch: Mapped[Batch] = relationship(back_populates="photos")


class TasteProfile(Base):
    __tablename__ = "taste_profiles"
    __table_args__ = (Index("ix_taste_profiles_batch_tasted", "batch_id", "tasted_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    batch_id: Mapped[int] = mapped_column(ForeignKey("batches.id", ondelete="CASCADE"), nullable=False)
    profile_text: Mapped[str] = mapped_column(Text, nullable=False)
    tasted_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    batch: Mapped[Batch] = relationship(back_populates="taste_profiles")
