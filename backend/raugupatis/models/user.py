from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from raugupatis.core.database import Base
from raugupatis.core.timeutils import utcnow

if TYPE_CHECKING:
    from raugupatis.models.batch import Batch


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    preferred_temp_unit: Mapped[str] = mapped_column(String(20), nullable=False, default="fahrenheit")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    batches: Mapped[list[Batch]] = relationship(back_populates="owner")
