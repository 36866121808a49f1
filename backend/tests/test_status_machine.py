from datetime import datetime

import pytest

from raugupatis.core.enums import BatchStatus
from raugupatis.core.errors import ValidationError
from raugupatis.schemas.batch import BatchFinish
from raugupatis.services.status_machine import (
    build_finish_changes,
    parse_status,
    transition_to,
    validate_success_rating,
)

NOW = datetime(2026, 3, 10, 18, 30)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("active", BatchStatus.ACTIVE),
        (" Paused ", BatchStatus.PAUSED),
        ("COMPLETED", BatchStatus.COMPLETED),
        (BatchStatus.FAILED, BatchStatus.FAILED),
    ],
)
def test_parse_status_accepts_known_values(raw: object, expected: BatchStatus) -> None:
    assert parse_status(raw) == expected


@pytest.mark.parametrize("raw", ["archived", "", None, "done"])
def test_parse_status_rejects_unknown_values(raw: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        parse_status(raw)

    assert exc_info.value.field == "status"


def test_transition_policy_is_permissive() -> None:
    assert transition_to(BatchStatus.ACTIVE, "paused") == BatchStatus.PAUSED
    assert transition_to(BatchStatus.COMPLETED, "active") == BatchStatus.ACTIVE
    assert transition_to(BatchStatus.FAILED, "completed") == BatchStatus.COMPLETED


@pytest.mark.parametrize("rating", [1, 3, 5, None])
def test_valid_success_ratings(rating: int | None) -> None:
    assert validate_success_rating(rating) == rating


@pytest.mark.parametrize("rating", [0, 6, 10, -1, True, 2.5])
def test_invalid_success_ratings(rating: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_success_rating(rating)

    assert exc_info.value.field == "success_rating"


def test_finish_changes_complete_the_batch() -> None:
    request = BatchFinish(success_rating=4, lessons_learned="  Less salt next time ", taste_profile=" Crisp, sour ")

    fields, taste_profile = build_finish_changes(request, NOW)

    assert fields == {
        "status": "completed",
        "actual_end_date": NOW,
        "success_rating": 4,
        "lessons_learned": "Less salt next time",
    }
    assert taste_profile == "Crisp, sour"


def test_finish_changes_skip_blank_optional_fields() -> None:
    fields, taste_profile = build_finish_changes(BatchFinish(lessons_learned="   ", taste_profile="\n"), NOW)

    assert fields == {"status": "completed", "actual_end_date": NOW}
    assert taste_profile is None


def test_finish_changes_reject_bad_rating_before_building_anything() -> None:
    with pytest.raises(ValidationError):
        build_finish_changes(BatchFinish(success_rating=10, taste_profile="Funky"), NOW)
