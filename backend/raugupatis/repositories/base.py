"""Persistence contract consumed by the batch and profile services.

Every method runs as its own unit of work. ``finish_batch`` in particular
must apply the batch changes and the optional taste note together or not
at all.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from raugupatis.core.enums import TemperatureUnit
from raugupatis.schemas.batch import BatchRead, PhotoRead, TasteProfileRead, TemperatureLogRead
from raugupatis.schemas.profile import ProfileRead
from raugupatis.services.batch_query import BatchFilter


class FermentationStore(Protocol):
    def get_batch(self, batch_id: int, owner_id: int) -> BatchRead | None:
        ...

    def list_batches(self, batch_filter: BatchFilter) -> list[BatchRead]:
        ...

    def insert_batch(self, owner_id: int, fields: dict[str, Any]) -> int:
        ...

    def update_batch_fields(self, batch_id: int, owner_id: int, fields: dict[str, Any]) -> bool:
        ...

    def finish_batch(
        self,
        batch_id: int,
        owner_id: int,
        fields: dict[str, Any],
        taste_profile_text: str | None,
        tasted_at: datetime,
    ) -> bool:
        ...

    def append_temperature_log(self, batch_id: int, fields: dict[str, Any]) -> TemperatureLogRead:
        ...

    def list_temperature_logs(self, batch_id: int) -> list[TemperatureLogRead]:
        ...

    def append_photo(self, batch_id: int, fields: dict[str, Any]) -> PhotoRead:
        ...

    def list_photos(self, batch_id: int) -> list[PhotoRead]:
        ...

    def append_taste_profile(self, batch_id: int, profile_text: str, tasted_at: datetime) -> TasteProfileRead:
        ...

    def list_taste_profiles(self, batch_id: int) -> list[TasteProfileRead]:
        ...

    def get_profile(self, profile_id: int) -> ProfileRead | None:
        ...

    def list_active_profiles(self) -> list[ProfileRead]:
        ...

    def list_profiles(self) -> list[ProfileRead]:
        ...

    def insert_profile(self, fields: dict[str, Any]) -> ProfileRead:
        ...

    def set_profile_active(self, profile_id: int, is_active: bool) -> bool:
        ...

    def get_preferred_temperature_unit(self, owner_id: int) -> TemperatureUnit | None:
        ...

    def set_preferred_temperature_unit(self, owner_id: int, unit: TemperatureUnit) -> bool:
        ...
