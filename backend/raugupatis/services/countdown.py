from __future__ import annotations

from datetime import datetime, timedelta

from raugupatis.core.enums import BatchStatus
from raugupatis.core.timeutils import as_naive_utc, utcnow
from raugupatis.schemas.batch import BatchRead, CountdownRead

_RUNNING_STATUSES = {BatchStatus.ACTIVE, BatchStatus.PAUSED}


def _remaining(target_end_date: datetime | None, now: datetime | None) -> timedelta | None:
    if target_end_date is None:
        return None
    current = as_naive_utc(now) if now is not None else utcnow()
    return as_naive_utc(target_end_date) - current


def should_show_countdown(
    target_end_date: datetime | None,
    status: BatchStatus,
    now: datetime | None = None,
) -> bool:
    if status not in _RUNNING_STATUSES:
        return False
    remaining = _remaining(target_end_date, now)
    return remaining is not None and remaining > timedelta(0)


def is_schedule_finished(
    target_end_date: datetime | None,
    status: BatchStatus,
    now: datetime | None = None,
) -> bool:
    if status not in _RUNNING_STATUSES:
        return False
    remaining = _remaining(target_end_date, now)
    return remaining is not None and remaining <= timedelta(0)


def countdown_display(target_end_date: datetime | None, now: datetime | None = None) -> str | None:
    """Format the time left until ``target_end_date``.

    Whole days are truncated, so a target five days out shows "4 days" as
    soon as any time has passed. Under a day the text switches to hours and
    minutes; ``None`` means there is no target or it has been reached.
    """
    remaining = _remaining(target_end_date, now)
    if remaining is None or remaining <= timedelta(0):
        return None

    if remaining.days >= 1:
        return "1 day" if remaining.days == 1 else f"{remaining.days} days"

    hours, leftover = divmod(remaining.seconds, 3600)
    minutes = leftover // 60
    return f"{hours}h {minutes}m"


def build_countdown(batch: BatchRead, now: datetime | None = None) -> CountdownRead:
    current = now or utcnow()
    show = should_show_countdown(batch.target_end_date, batch.status, now=current)
    return CountdownRead(
        show_countdown=show,
        schedule_finished=is_schedule_finished(batch.target_end_date, batch.status, now=current),
        display=countdown_display(batch.target_end_date, now=current) if show else None,
    )
