from __future__ import annotations

from collections.abc import Iterable, Sequence

from raugupatis.core.enums import BatchStatus, PhotoStage
from raugupatis.schemas.batch import PhotoRead


def _first_path(photos: Iterable[PhotoRead], stage: PhotoStage) -> str | None:
    for photo in photos:
        if photo.stage == stage:
            return photo.file_path
    return None


def select_thumbnail(status: BatchStatus, photos: Sequence[PhotoRead]) -> str | None:
    """Pick the representative image for a batch.

    ``photos`` must already be ordered by ``taken_at`` ascending. Finished
    batches prefer their first end-stage photo and fall back to the first
    start-stage photo; running batches only ever show a start-stage photo.
    """
    if status.is_finished:
        stage_order = (PhotoStage.END, PhotoStage.START)
    else:
        stage_order = (PhotoStage.START,)

    for stage in stage_order:
        path = _first_path(photos, stage)
        if path is not None:
            return path
    return None
