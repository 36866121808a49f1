from __future__ import annotations

import json
import logging
from typing import Any

from raugupatis.core.config import settings
from raugupatis.core.enums import BatchStatus, PhotoStage, TemperatureUnit
from raugupatis.core.errors import NotFoundError, ValidationError
from raugupatis.core.timeutils import as_naive_utc, utcnow
from raugupatis.repositories.base import FermentationStore
from raugupatis.schemas.batch import (
    BatchCreate,
    BatchFinish,
    BatchListQuery,
    BatchRead,
    BatchSummaryRead,
    BatchUpdate,
    PhotoCreate,
    PhotoRead,
    TasteProfileCreate,
    TasteProfileRead,
    TemperatureLogCreate,
    TemperatureLogRead,
    TemperatureReadingDisplay,
)
from raugupatis.schemas.profile import ProfileRead
from raugupatis.services.batch_query import build_batch_filter
from raugupatis.services.status_machine import (
    build_finish_changes,
    clean_text,
    transition_to,
    validate_success_rating,
)
from raugupatis.services.temperature import (
    convert_for_display,
    convert_for_storage,
    resolve_unit,
    unit_symbol,
    validate_storage_temperature,
)
from raugupatis.services.thumbnails import select_thumbnail

logger = logging.getLogger("raugupatis.batches")

_DATE_FIELDS = ("start_date", "target_end_date", "actual_end_date")
_TEXT_FIELDS = ("notes", "ingredients", "lessons_learned")


def _log_event(event: str, level: int = logging.INFO, **fields: object) -> None:
    payload: dict[str, object] = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str))


def _validate_name(name: str | None) -> str:
    stripped = (name or "").strip()
    if not stripped:
        raise ValidationError("name", "must not be empty")
    if len(stripped) > settings.max_batch_name_length:
        raise ValidationError("name", f"must be at most {settings.max_batch_name_length} characters")
    return stripped


def _get_owned_batch_or_raise(store: FermentationStore, batch_id: int, owner_id: int) -> BatchRead:
    batch = store.get_batch(batch_id, owner_id)
    if batch is None:
        _log_event("batch_not_found", logging.WARNING, batch_id=batch_id, owner_id=owner_id)
        raise NotFoundError("batch")
    return batch


def _get_profile_or_raise(store: FermentationStore, profile_id: int) -> ProfileRead:
    profile = store.get_profile(profile_id)
    if profile is None:
        raise NotFoundError("profile")
    return profile


def get_batch(store: FermentationStore, batch_id: int, owner_id: int) -> BatchRead:
    return _get_owned_batch_or_raise(store, batch_id, owner_id)


def list_available_profiles(store: FermentationStore) -> list[ProfileRead]:
    return store.list_active_profiles()


def create_batch(store: FermentationStore, owner_id: int, request: BatchCreate) -> BatchRead:
    name = _validate_name(request.name)

    profile = _get_profile_or_raise(store, request.profile_id)
    if not profile.is_active:
        raise ValidationError("profile_id", "profile is no longer offered for new batches")

    batch_id = store.insert_batch(
        owner_id,
        {
            "profile_id": profile.id,
            "name": name,
            "start_date": as_naive_utc(request.start_date),
            "target_end_date": as_naive_utc(request.target_end_date) if request.target_end_date else None,
            "status": BatchStatus.ACTIVE.value,
            "notes": request.notes,
            "ingredients": request.ingredients,
        },
    )
    _log_event("batch_created", batch_id=batch_id, owner_id=owner_id, profile_id=profile.id)
    return _get_owned_batch_or_raise(store, batch_id, owner_id)


def _validated_update_fields(
    store: FermentationStore,
    current: BatchRead,
    request: BatchUpdate,
) -> dict[str, Any]:
    supplied = request.model_dump(exclude_unset=True)
    fields: dict[str, Any] = {}

    if "name" in supplied:
        fields["name"] = _validate_name(supplied["name"])

    if "profile_id" in supplied:
        if supplied["profile_id"] is None:
            raise ValidationError("profile_id", "must not be empty")
        fields["profile_id"] = _get_profile_or_raise(store, supplied["profile_id"]).id

    if "status" in supplied:
        fields["status"] = transition_to(current.status, supplied["status"]).value

    if "success_rating" in supplied:
        fields["success_rating"] = validate_success_rating(supplied["success_rating"])

    for field in _DATE_FIELDS:
        if field not in supplied:
            continue
        value = supplied[field]
        if value is None and field == "start_date":
            raise ValidationError("start_date", "must not be empty")
        fields[field] = as_naive_utc(value) if value is not None else None

    for field in _TEXT_FIELDS:
        if field in supplied:
            fields[field] = supplied[field]

    return fields


def update_batch(store: FermentationStore, batch_id: int, owner_id: int, request: BatchUpdate) -> BatchRead:
    current = _get_owned_batch_or_raise(store, batch_id, owner_id)
    fields = _validated_update_fields(store, current, request)

    if not store.update_batch_fields(batch_id, owner_id, fields):
        raise NotFoundError("batch")

    _log_event("batch_updated", batch_id=batch_id, owner_id=owner_id, fields=sorted(fields))
    return _get_owned_batch_or_raise(store, batch_id, owner_id)


def finish_batch(store: FermentationStore, batch_id: int, owner_id: int, request: BatchFinish) -> BatchRead:
    _get_owned_batch_or_raise(store, batch_id, owner_id)

    now = utcnow()
    fields, taste_profile_text = build_finish_changes(request, now)

    if not store.finish_batch(batch_id, owner_id, fields, taste_profile_text, now):
        raise NotFoundError("batch")

    _log_event(
        "batch_finished",
        batch_id=batch_id,
        owner_id=owner_id,
        success_rating=fields.get("success_rating"),
        taste_profile_recorded=taste_profile_text is not None,
    )
    return _get_owned_batch_or_raise(store, batch_id, owner_id)


def list_batches(
    store: FermentationStore,
    owner_id: int,
    query: BatchListQuery | None = None,
) -> list[BatchSummaryRead]:
    batch_filter = build_batch_filter(owner_id, query)
    batches = store.list_batches(batch_filter)

    return [
        BatchSummaryRead(
            **batch.model_dump(),
            thumbnail_path=select_thumbnail(batch.status, store.list_photos(batch.id)),
        )
        for batch in batches
    ]


def log_temperature(
    store: FermentationStore,
    batch_id: int,
    owner_id: int,
    request: TemperatureLogCreate,
) -> TemperatureLogRead:
    _get_owned_batch_or_raise(store, batch_id, owner_id)

    preferred = store.get_preferred_temperature_unit(owner_id)
    source_unit = resolve_unit(request.unit, preferred)
    temperature_f = validate_storage_temperature(convert_for_storage(request.temperature, source_unit))

    log = store.append_temperature_log(
        batch_id,
        {
            "recorded_at": as_naive_utc(request.recorded_at) if request.recorded_at else utcnow(),
            "temperature": temperature_f,
            "notes": clean_text(request.notes),
        },
    )
    _log_event(
        "temperature_logged",
        batch_id=batch_id,
        owner_id=owner_id,
        temperature_f=round(temperature_f, 2),
        source_unit=source_unit.value,
    )
    return log


def list_temperature_logs(
    store: FermentationStore,
    batch_id: int,
    owner_id: int,
    display_unit: str | None = None,
) -> list[TemperatureReadingDisplay]:
    _get_owned_batch_or_raise(store, batch_id, owner_id)

    preferred = store.get_preferred_temperature_unit(owner_id)
    unit: TemperatureUnit = resolve_unit(display_unit, preferred)

    return [
        TemperatureReadingDisplay(
            id=log.id,
            recorded_at=log.recorded_at,
            temperature=round(convert_for_display(log.temperature, unit), 2),
            unit=unit.value,
            unit_symbol=unit_symbol(unit),
            notes=log.notes,
        )
        for log in store.list_temperature_logs(batch_id)
    ]


def add_photo(store: FermentationStore, batch_id: int, owner_id: int, request: PhotoCreate) -> PhotoRead:
    _get_owned_batch_or_raise(store, batch_id, owner_id)

    file_path = request.file_path.strip()
    if not file_path:
        raise ValidationError("file_path", "must not be empty")

    photo = store.append_photo(
        batch_id,
        {
            "file_path": file_path,
            "caption": clean_text(request.caption),
            "taken_at": as_naive_utc(request.taken_at) if request.taken_at else utcnow(),
            "stage": PhotoStage.parse(request.stage).value,
        },
    )
    _log_event("photo_added", batch_id=batch_id, owner_id=owner_id, stage=photo.stage.value)
    return photo


def list_photos(store: FermentationStore, batch_id: int, owner_id: int) -> list[PhotoRead]:
    _get_owned_batch_or_raise(store, batch_id, owner_id)
    return store.list_photos(batch_id)


def add_taste_profile(
    store: FermentationStore,
    batch_id: int,
    owner_id: int,
    request: TasteProfileCreate,
) -> TasteProfileRead:
    _get_owned_batch_or_raise(store, batch_id, owner_id)

    profile_text = clean_text(request.profile_text)
    if profile_text is None:
        raise ValidationError("profile_text", "must not be empty")

    tasted_at = as_naive_utc(request.tasted_at) if request.tasted_at else utcnow()
    taste_profile = store.append_taste_profile(batch_id, profile_text, tasted_at)
    _log_event("taste_profile_added", batch_id=batch_id, owner_id=owner_id)
    return taste_profile


def list_taste_profiles(store: FermentationStore, batch_id: int, owner_id: int) -> list[TasteProfileRead]:
    _get_owned_batch_or_raise(store, batch_id, owner_id)
    return store.list_taste_profiles(batch_id)
