from __future__ import annotations

from dataclasses import dataclass

from raugupatis.core.enums import BatchStatus, SortField, SortOrder
from raugupatis.schemas.batch import BatchListQuery
from raugupatis.services.status_machine import parse_status

SEARCH_FIELDS: tuple[str, ...] = ("name", "notes", "ingredients")


@dataclass(frozen=True)
class BatchFilter:
    """Structured listing request handed to the store.

    Values are kept as data; the store binds them as query parameters.
    """

    owner_id: int
    search: str | None = None
    status: BatchStatus | None = None
    profile_type: str | None = None
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    @property
    def search_fields(self) -> tuple[str, ...]:
        return SEARCH_FIELDS if self.search else ()


def _non_blank(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def build_batch_filter(owner_id: int, query: BatchListQuery | None = None) -> BatchFilter:
    query = query or BatchListQuery()

    status_value = _non_blank(query.status)
    return BatchFilter(
        owner_id=owner_id,
        search=_non_blank(query.search),
        status=parse_status(status_value) if status_value is not None else None,
        profile_type=_non_blank(query.profile_type),
        sort_by=SortField.parse(query.sort_by),
        sort_order=SortOrder.parse(query.sort_order),
    )
