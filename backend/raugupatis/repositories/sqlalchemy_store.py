from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager, joinedload, sessionmaker

from raugupatis.core.enums import SortField, SortOrder, TemperatureUnit
from raugupatis.core.errors import ConflictError, StorageError
from raugupatis.core.timeutils import utcnow
from raugupatis.models.batch import Batch, Photo, TasteProfile, TemperatureLog
from raugupatis.models.profile import FermentationProfile
from raugupatis.models.user import User
from raugupatis.schemas.batch import BatchRead, PhotoRead, TasteProfileRead, TemperatureLogRead
from raugupatis.schemas.profile import ProfileRead
from raugupatis.services.batch_query import BatchFilter

logger = logging.getLogger("raugupatis.store")

_SORT_COLUMNS = {
    SortField.NAME: Batch.name,
    SortField.START_DATE: Batch.start_date,
    SortField.STATUS: Batch.status,
    SortField.CREATED_AT: Batch.created_at,
}


class SqlAlchemyFermentationStore:
    """``FermentationStore`` backed by a SQLAlchemy session factory.

    Each public method opens its own session and transaction; nothing is
    shared between calls.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _transaction(self, operation: str, *, conflict_field: str | None = None) -> Iterator[Session]:
        try:
            with self._session_factory.begin() as db:
                yield db
        except IntegrityError as exc:
            if conflict_field is not None:
                raise ConflictError(conflict_field, "already exists") from exc
            self._log_failure(operation, exc)
            raise StorageError(f"{operation} failed") from exc
        except SQLAlchemyError as exc:
            self._log_failure(operation, exc)
            raise StorageError(f"{operation} failed") from exc

    @staticmethod
    def _log_failure(operation: str, exc: Exception) -> None:
        payload = {
            "event": "storage_error",
            "operation": operation,
            "error": exc.__class__.__name__,
        }
        logger.exception(json.dumps(payload))

    @staticmethod
    def _owned_batch(db: Session, batch_id: int, owner_id: int) -> Batch | None:
        return (
            db.execute(
                select(Batch)
                .options(joinedload(Batch.profile))
                .where(
                    Batch.id == batch_id,
                    Batch.owner_id == owner_id,
                )
            )
            .scalars()
            .first()
        )

    def get_batch(self, batch_id: int, owner_id: int) -> BatchRead | None:
        with self._transaction("get_batch") as db:
            batch = self._owned_batch(db, batch_id, owner_id)
            return BatchRead.model_validate(batch) if batch else None

    def list_batches(self, batch_filter: BatchFilter) -> list[BatchRead]:
        stmt = (
            select(Batch)
            .outerjoin(FermentationProfile, Batch.profile_id == FermentationProfile.id)
            .options(contains_eager(Batch.profile))
            .where(Batch.owner_id == batch_filter.owner_id)
        )

        if batch_filter.search:
            stmt = stmt.where(
                or_(
                    *(
                        getattr(Batch, field).icontains(batch_filter.search, autoescape=True)
                        for field in batch_filter.search_fields
                    )
                )
            )

        if batch_filter.status is not None:
            stmt = stmt.where(Batch.status == batch_filter.status.value)

        if batch_filter.profile_type:
            stmt = stmt.where(FermentationProfile.type == batch_filter.profile_type)

        sort_column = _SORT_COLUMNS[batch_filter.sort_by]
        if batch_filter.sort_order == SortOrder.ASC:
            stmt = stmt.order_by(sort_column.asc(), Batch.id.asc())
        else:
            stmt = stmt.order_by(sort_column.desc(), Batch.id.desc())

        with self._transaction("list_batches") as db:
            batches = db.execute(stmt).scalars().unique().all()
            return [BatchRead.model_validate(batch) for batch in batches]

    def insert_batch(self, owner_id: int, fields: dict[str, Any]) -> int:
        with self._transaction("insert_batch") as db:
            batch = Batch(owner_id=owner_id, **fields)
            db.add(batch)
            db.flush()
            return batch.id

    def update_batch_fields(self, batch_id: int, owner_id: int, fields: dict[str, Any]) -> bool:
        with self._transaction("update_batch_fields") as db:
            batch = self._owned_batch(db, batch_id, owner_id)
            if batch is None:
                return False

            for key, value in fields.items():
                setattr(batch, key, value)
            batch.updated_at = utcnow()
            return True

    def finish_batch(
        self,
        batch_id: int,
        owner_id: int,
        fields: dict[str, Any],
        taste_profile_text: str | None,
        tasted_at: datetime,
    ) -> bool:
        with self._transaction("finish_batch") as db:
            batch = self._owned_batch(db, batch_id, owner_id)
            if batch is None:
                return False

            for key, value in fields.items():
                setattr(batch, key, value)
            batch.updated_at = utcnow()

            if taste_profile_text:
                db.add(
                    TasteProfile(
                        batch_id=batch.id,
                        profile_text=taste_profile_text,
                        tasted_at=tasted_at,
                    )
                )
            return True

    def append_temperature_log(self, batch_id: int, fields: dict[str, Any]) -> TemperatureLogRead:
        with self._transaction("append_temperature_log") as db:
            log = TemperatureLog(batch_id=batch_id, **fields)
            db.add(log)
            db.flush()
            return TemperatureLogRead.model_validate(log)

    def list_temperature_logs(self, batch_id: int) -> list[TemperatureLogRead]:
        with self._transaction("list_temperature_logs") as db:
            logs = db.execute(
                select(TemperatureLog)
                .where(TemperatureLog.batch_id == batch_id)
                .order_by(TemperatureLog.recorded_at.desc(), TemperatureLog.id.desc())
            ).scalars()
            return [TemperatureLogRead.model_validate(log) for log in logs]

    def append_photo(self, batch_id: int, fields: dict[str, Any]) -> PhotoRead:
        with self._transaction("append_photo") as db:
            photo = Photo(batch_id=batch_id, **fields)
            db.add(photo)
            db.flush()
            return PhotoRead.model_validate(photo)

    def list_photos(self, batch_id: int) -> list[PhotoRead]:
        with self._transaction("list_photos") as db:
            photos = db.execute(
                select(Photo)
                .where(Photo.batch_id == batch_id)
                .order_by(Photo.taken_at.asc(), Photo.created_at.asc(), Photo.id.asc())
            ).scalars()
            return [PhotoRead.model_validate(photo) for photo in photos]

    def append_taste_profile(self, batch_id: int, profile_text: str, tasted_at: datetime) -> TasteProfileRead:
        with self._transaction("append_taste_profile") as db:
            taste_profile = TasteProfile(batch_id=batch_id, profile_text=profile_text, tasted_at=tasted_at)
            db.add(taste_profile)
            db.flush()
            return TasteProfileRead.model_validate(taste_profile)

    def list_taste_profiles(self, batch_id: int) -> list[TasteProfileRead]:
        with self._transaction("list_taste_profiles") as db:
            taste_profiles = db.execute(
                select(TasteProfile)
                .where(TasteProfile.batch_id == batch_id)
                .order_by(TasteProfile.tasted_at.desc(), TasteProfile.id.desc())
            ).scalars()
            return [TasteProfileRead.model_validate(item) for item in taste_profiles]

    def get_profile(self, profile_id: int) -> ProfileRead | None:
        with self._transaction("get_profile") as db:
            profile = db.get(FermentationProfile, profile_id)
            return ProfileRead.model_validate(profile) if profile else None

    def list_active_profiles(self) -> list[ProfileRead]:
        with self._transaction("list_active_profiles") as db:
            profiles = db.execute(
                select(FermentationProfile)
                .where(FermentationProfile.is_active.is_(True))
                .order_by(FermentationProfile.name.asc())
            ).scalars()
            return [ProfileRead.model_validate(profile) for profile in profiles]

    def list_profiles(self) -> list[ProfileRead]:
        with self._transaction("list_profiles") as db:
            profiles = db.execute(select(FermentationProfile).order_by(FermentationProfile.name.asc())).scalars()
            return [ProfileRead.model_validate(profile) for profile in profiles]

    def insert_profile(self, fields: dict[str, Any]) -> ProfileRead:
        with self._transaction("insert_profile", conflict_field="name") as db:
            duplicate = db.execute(
                select(FermentationProfile.id).where(FermentationProfile.name == fields["name"])
            ).first()
            if duplicate is not None:
                raise ConflictError("name", "already exists")

            profile = FermentationProfile(is_active=True, **fields)
            db.add(profile)
            db.flush()
            return ProfileRead.model_validate(profile)

    def set_profile_active(self, profile_id: int, is_active: bool) -> bool:
        with self._transaction("set_profile_active") as db:
            profile = db.get(FermentationProfile, profile_id)
            if profile is None:
                return False
            profile.is_active = is_active
            return True

    def get_preferred_temperature_unit(self, owner_id: int) -> TemperatureUnit | None:
        with self._transaction("get_preferred_temperature_unit") as db:
            preferred = db.execute(select(User.preferred_temp_unit).where(User.id == owner_id)).scalar_one_or_none()
            return TemperatureUnit.parse(preferred)

    def set_preferred_temperature_unit(self, owner_id: int, unit: TemperatureUnit) -> bool:
        with self._transaction("set_preferred_temperature_unit") as db:
            user = db.get(User, owner_id)
            if user is None:
                return False
            user.preferred_temp_unit = unit.value
            return True
