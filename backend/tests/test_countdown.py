from datetime import datetime, timedelta, timezone

import pytest

from raugupatis.core.enums import BatchStatus
from raugupatis.schemas.batch import BatchRead
from raugupatis.services.countdown import (
    build_countdown,
    countdown_display,
    is_schedule_finished,
    should_show_countdown,
)

NOW = datetime(2026, 3, 1, 12, 0)


@pytest.mark.parametrize(
    ("remaining", "expected"),
    [
        (timedelta(days=5), "5 days"),
        (timedelta(days=2, hours=3), "2 days"),
        (timedelta(days=1), "1 day"),
        (timedelta(days=1) - timedelta(seconds=1), "23h 59m"),
        (timedelta(hours=2, minutes=30), "2h 30m"),
        (timedelta(seconds=30), "0h 0m"),
    ],
)
def test_countdown_display(remaining: timedelta, expected: str) -> None:
    assert countdown_display(NOW + remaining, now=NOW) == expected


def test_countdown_display_is_empty_without_target_or_once_reached() -> None:
    assert countdown_display(None, now=NOW) is None
    assert countdown_display(NOW, now=NOW) is None
    assert countdown_display(NOW - timedelta(minutes=1), now=NOW) is None


def test_countdown_switches_to_hours_below_one_day() -> None:
    target = NOW + timedelta(days=3)

    for hours_elapsed in range(0, 73):
        now = NOW + timedelta(hours=hours_elapsed)
        display = countdown_display(target, now=now)
        remaining = target - now

        if remaining >= timedelta(days=1):
            assert display is not None and display.endswith(("days", "day"))
        elif remaining > timedelta(0):
            assert display is not None and display.endswith("m")
        else:
            assert display is None


def test_countdown_flags_for_running_batches() -> None:
    future = NOW + timedelta(hours=1)
    past = NOW - timedelta(hours=1)

    assert should_show_countdown(future, BatchStatus.ACTIVE, now=NOW)
    assert should_show_countdown(future, BatchStatus.PAUSED, now=NOW)
    assert not is_schedule_finished(future, BatchStatus.ACTIVE, now=NOW)

    assert not should_show_countdown(past, BatchStatus.ACTIVE, now=NOW)
    assert is_schedule_finished(past, BatchStatus.ACTIVE, now=NOW)
    assert is_schedule_finished(NOW, BatchStatus.PAUSED, now=NOW)


def test_countdown_flags_ignore_finished_batches_and_missing_targets() -> None:
    future = NOW + timedelta(days=2)

    assert not should_show_countdown(future, BatchStatus.COMPLETED, now=NOW)
    assert not is_schedule_finished(NOW - timedelta(days=2), BatchStatus.FAILED, now=NOW)
    assert not should_show_countdown(None, BatchStatus.ACTIVE, now=NOW)
    assert not is_schedule_finished(None, BatchStatus.ACTIVE, now=NOW)


def test_timezone_aware_target_is_compared_in_utc() -> None:
    target = datetime(2026, 3, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert countdown_display(target, now=NOW) is None
    assert is_schedule_finished(target, BatchStatus.ACTIVE, now=NOW)


def test_five_day_schedule_scenario() -> None:
    batch = BatchRead(
        id=1,
        owner_id=1,
        profile_id=1,
        name="Kombucha F1",
        start_date=NOW,
        target_end_date=NOW + timedelta(days=5),
        status=BatchStatus.ACTIVE,
        created_at=NOW,
        updated_at=NOW,
    )

    countdown = build_countdown(batch, now=NOW)
    assert countdown.show_countdown is True
    assert countdown.schedule_finished is False
    assert countdown.display == "5 days"

    later = build_countdown(batch, now=NOW + timedelta(days=5, minutes=1))
    assert later.show_countdown is False
    assert later.schedule_finished is True
    assert later.display is None


def test_whole_days_are_truncated_once_time_passes() -> None:
    target = NOW + timedelta(days=5)

    assert countdown_display(target, now=NOW) == "5 days"
    assert countdown_display(target, now=NOW + timedelta(seconds=1)) == "4 days"
    assert countdown_display(target, now=NOW + timedelta(days=4, seconds=1)) == "23h 59m"
