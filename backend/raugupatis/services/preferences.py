from __future__ import annotations

import json
import logging

from raugupatis.core.config import settings
from raugupatis.core.enums import TemperatureUnit
from raugupatis.core.errors import NotFoundError, ValidationError
from raugupatis.repositories.base import FermentationStore

logger = logging.getLogger("raugupatis.preferences")


def get_temperature_preference(store: FermentationStore, owner_id: int) -> TemperatureUnit:
    preferred = store.get_preferred_temperature_unit(owner_id)
    if preferred is not None:
        return preferred
    return TemperatureUnit.parse(settings.default_temperature_unit) or TemperatureUnit.FAHRENHEIT


def update_temperature_preference(store: FermentationStore, owner_id: int, unit: str) -> TemperatureUnit:
    parsed = TemperatureUnit.parse(unit)
    if parsed is None:
        raise ValidationError("preferred_temp_unit", "must be 'fahrenheit' or 'celsius'")

    if not store.set_preferred_temperature_unit(owner_id, parsed):
        raise NotFoundError("user")

    logger.info(json.dumps({"event": "temperature_preference_updated", "owner_id": owner_id, "unit": parsed.value}))
    return parsed
