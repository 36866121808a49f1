from collections.abc import Callable

import pytest

from raugupatis.core.enums import TemperatureUnit
from raugupatis.core.errors import NotFoundError, ValidationError
from raugupatis.repositories.sqlalchemy_store import SqlAlchemyFermentationStore
from raugupatis.schemas.batch import BatchCreate, TemperatureLogCreate
from raugupatis.services import batches, preferences


def test_changing_preference_changes_displayed_unit(
    store: SqlAlchemyFermentationStore,
    owners: dict[str, int],
    profiles: dict[str, int],
    batch_request: Callable[..., BatchCreate],
) -> None:
    batch = batches.create_batch(store, owners["alice"], batch_request(profiles["Pickles"]))
    batches.log_temperature(store, batch.id, owners["alice"], TemperatureLogCreate(temperature=77.0))

    [before] = batches.list_temperature_logs(store, batch.id, owners["alice"])
    updated = preferences.update_temperature_preference(store, owners["alice"], "C")
    [after] = batches.list_temperature_logs(store, batch.id, owners["alice"])

    assert before.temperature == 77.0
    assert before.unit_symbol == "°F"
    assert updated == TemperatureUnit.CELSIUS
    assert preferences.get_temperature_preference(store, owners["alice"]) == TemperatureUnit.CELSIUS
    assert after.temperature == 25.0
    assert after.unit_symbol == "°C"


def test_preference_applies_to_new_readings(
    store: SqlAlchemyFermentationStore,
    owners: dict[str, int],
    profiles: dict[str, int],
    batch_request: Callable[..., BatchCreate],
) -> None:
    batch = batches.create_batch(store, owners["bob"], batch_request(profiles["Pickles"]))
    preferences.update_temperature_preference(store, owners["bob"], "fahrenheit")

    log = batches.log_temperature(store, batch.id, owners["bob"], TemperatureLogCreate(temperature=70.0))

    assert log.temperature == 70.0


def test_update_preference_rejects_unknown_unit(
    store: SqlAlchemyFermentationStore,
    owners: dict[str, int],
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        preferences.update_temperature_preference(store, owners["bob"], "kelvin")

    assert exc_info.value.field == "preferred_temp_unit"
    assert store.get_preferred_temperature_unit(owners["bob"]) == TemperatureUnit.CELSIUS


def test_update_preference_for_unknown_user(store: SqlAlchemyFermentationStore) -> None:
    with pytest.raises(NotFoundError):
        preferences.update_temperature_preference(store, 9999, "celsius")

    assert preferences.get_temperature_preference(store, 9999) == TemperatureUnit.FAHRENHEIT
