from __future__ import annotations

import json
import logging

from raugupatis.core.errors import NotFoundError, ValidationError
from raugupatis.repositories.base import FermentationStore
from raugupatis.schemas.profile import ProfileCreate, ProfileRead

logger = logging.getLogger("raugupatis.profiles")


def _validate_ranges(request: ProfileCreate) -> None:
    if request.min_days > request.max_days:
        raise ValidationError("max_days", "must be greater than or equal to min_days")
    if request.temp_min > request.temp_max:
        raise ValidationError("temp_max", "must be greater than or equal to temp_min")


def list_all_profiles(store: FermentationStore) -> list[ProfileRead]:
    return store.list_profiles()


def create_profile(store: FermentationStore, request: ProfileCreate) -> ProfileRead:
    _validate_ranges(request)

    fields = request.model_dump()
    fields["name"] = request.name.strip()
    fields["type"] = request.type.strip()
    if not fields["name"]:
        raise ValidationError("name", "must not be empty")

    profile = store.insert_profile(fields)
    logger.info(json.dumps({"event": "profile_created", "profile_id": profile.id, "name": profile.name}))
    return profile


def copy_profile(store: FermentationStore, profile_id: int, new_name: str) -> ProfileRead:
    if not new_name.strip():
        raise ValidationError("name", "must not be empty")

    source = store.get_profile(profile_id)
    if source is None:
        raise NotFoundError("profile")

    request = ProfileCreate(
        name=new_name,
        type=source.type,
        min_days=source.min_days,
        max_days=source.max_days,
        temp_min=source.temp_min,
        temp_max=source.temp_max,
        description=source.description,
    )
    return create_profile(store, request)


def set_profile_active(store: FermentationStore, profile_id: int, is_active: bool) -> ProfileRead:
    if not store.set_profile_active(profile_id, is_active):
        raise NotFoundError("profile")

    logger.info(json.dumps({"event": "profile_active_changed", "profile_id": profile_id, "is_active": is_active}))
    profile = store.get_profile(profile_id)
    if profile is None:
        raise NotFoundError("profile")
    return profile
