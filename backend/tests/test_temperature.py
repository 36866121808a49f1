import math

import pytest

from raugupatis.core.config import settings
from raugupatis.core.enums import TemperatureUnit
from raugupatis.core.errors import ValidationError
from raugupatis.services.temperature import (
    celsius_to_fahrenheit,
    convert_for_display,
    convert_for_storage,
    fahrenheit_to_celsius,
    resolve_unit,
    unit_symbol,
    validate_storage_temperature,
)


def test_fixed_points() -> None:
    assert fahrenheit_to_celsius(32.0) == 0.0
    assert fahrenheit_to_celsius(212.0) == 100.0
    assert celsius_to_fahrenheit(0.0) == 32.0
    assert celsius_to_fahrenheit(100.0) == 212.0
    assert celsius_to_fahrenheit(20.0) == 68.0


@pytest.mark.parametrize("fahrenheit", [0.0, 33.5, 65.0, 72.4, 98.6, 150.25, 212.0])
def test_round_trip_within_tolerance(fahrenheit: float) -> None:
    assert abs(celsius_to_fahrenheit(fahrenheit_to_celsius(fahrenheit)) - fahrenheit) < 1e-4


def test_display_conversion_uses_preferred_unit() -> None:
    assert convert_for_display(75.0, TemperatureUnit.FAHRENHEIT) == 75.0
    assert convert_for_display(68.0, TemperatureUnit.CELSIUS) == pytest.approx(20.0)


def test_storage_conversion_always_yields_fahrenheit() -> None:
    assert convert_for_storage(75.0, TemperatureUnit.FAHRENHEIT) == 75.0
    assert convert_for_storage(20.0, TemperatureUnit.CELSIUS) == 68.0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, -1.0, 500.0])
def test_storage_temperature_rejects_implausible_values(value: float) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_storage_temperature(value)

    assert exc_info.value.field == "temperature"


def test_storage_temperature_range_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "max_temperature_f", 100.0)

    assert validate_storage_temperature(99.5) == 99.5
    with pytest.raises(ValidationError):
        validate_storage_temperature(100.5)


def test_resolve_unit_prefers_explicit_then_preference() -> None:
    assert resolve_unit("C", TemperatureUnit.FAHRENHEIT) == TemperatureUnit.CELSIUS
    assert resolve_unit(None, TemperatureUnit.CELSIUS) == TemperatureUnit.CELSIUS
    assert resolve_unit("  ", None) == TemperatureUnit.FAHRENHEIT


def test_resolve_unit_rejects_unknown_unit() -> None:
    with pytest.raises(ValidationError) as exc_info:
        resolve_unit("kelvin", None)

    assert exc_info.value.field == "unit"


def test_unit_symbols() -> None:
    assert unit_symbol(TemperatureUnit.FAHRENHEIT) == "°F"
    assert unit_symbol(TemperatureUnit.CELSIUS) == "°C"
