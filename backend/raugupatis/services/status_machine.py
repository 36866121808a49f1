"""Batch lifecycle rules.

Batches start ``active`` and are normally closed out through ``finish``.
The generic update path may still move a batch between any two states;
that policy lives in ``transition_to`` alone so it can be tightened without
touching callers.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from raugupatis.core.enums import BatchStatus
from raugupatis.core.errors import ValidationError
from raugupatis.schemas.batch import BatchFinish

MIN_SUCCESS_RATING = 1
MAX_SUCCESS_RATING = 5


def parse_status(value: BatchStatus | str | None) -> BatchStatus:
    status = BatchStatus.parse(value)
    if status is None:
        allowed = ", ".join(item.value for item in BatchStatus)
        raise ValidationError("status", f"must be one of: {allowed}")
    return status


def transition_to(current: BatchStatus, new_status: BatchStatus | str | None) -> BatchStatus:
    """Return the parsed target status; every move from ``current`` is currently allowed."""
    return parse_status(new_status)


def validate_success_rating(rating: Any) -> int | None:
    if rating is None:
        return None
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError("success_rating", "must be a whole number")
    if rating < MIN_SUCCESS_RATING or rating > MAX_SUCCESS_RATING:
        raise ValidationError(
            "success_rating",
            f"must be between {MIN_SUCCESS_RATING} and {MAX_SUCCESS_RATING}",
        )
    return rating


def clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def build_finish_changes(request: BatchFinish, now: datetime) -> tuple[dict[str, Any], str | None]:
    """Validate a finish request and return the batch changes plus the initial taste note.

    Nothing is written here; a ``ValidationError`` leaves the batch untouched.
    """
    rating = validate_success_rating(request.success_rating)

    fields: dict[str, Any] = {
        "status": BatchStatus.COMPLETED.value,
        "actual_end_date": now,
    }
    if rating is not None:
        fields["success_rating"] = rating

    lessons = clean_text(request.lessons_learned)
    if lessons is not None:
        fields["lessons_learned"] = lessons

    return fields, clean_text(request.taste_profile)
