"""Temperature conversion.

Every stored temperature is Fahrenheit. The unit a reading was typed in, or
the unit a user wants to see, only matters at input and display time.
"""
from __future__ import annotations

import math

from raugupatis.core.config import settings
from raugupatis.core.enums import TemperatureUnit
from raugupatis.core.errors import ValidationError

_UNIT_SYMBOLS: dict[TemperatureUnit, str] = {
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.CELSIUS: "°C",
}


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 9.0 / 5.0) + 32.0


def convert_for_display(temp_fahrenheit: float, preferred_unit: TemperatureUnit) -> float:
    if preferred_unit == TemperatureUnit.CELSIUS:
        return fahrenheit_to_celsius(temp_fahrenheit)
    return temp_fahrenheit


def convert_for_storage(value: float, source_unit: TemperatureUnit) -> float:
    if source_unit == TemperatureUnit.CELSIUS:
        return celsius_to_fahrenheit(value)
    return value


def validate_storage_temperature(temp_fahrenheit: float) -> float:
    if not math.isfinite(temp_fahrenheit):
        raise ValidationError("temperature", "must be a finite number")

    if temp_fahrenheit < settings.min_temperature_f or temp_fahrenheit > settings.max_temperature_f:
        raise ValidationError(
            "temperature",
            f"must be between {settings.min_temperature_f:g}°F and {settings.max_temperature_f:g}°F",
        )
    return temp_fahrenheit


def unit_symbol(unit: TemperatureUnit) -> str:
    return _UNIT_SYMBOLS[unit]


def resolve_unit(requested: str | None, preferred: TemperatureUnit | None) -> TemperatureUnit:
    """Pick the unit for a reading: explicit request, then user preference, then the default."""
    if requested is not None and requested.strip():
        unit = TemperatureUnit.parse(requested)
        if unit is None:
            raise ValidationError("unit", "must be 'fahrenheit' or 'celsius'")
        return unit

    if preferred is not None:
        return preferred

    return TemperatureUnit.parse(settings.default_temperature_unit) or TemperatureUnit.FAHRENHEIT
