"""Closed vocabularies stored as plain strings.

Each enum owns the single conversion between its storage string and the
Python value; nothing else in the package compares raw strings.
"""
from __future__ import annotations

from enum import Enum


class BatchStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def parse(cls, value: BatchStatus | str | None) -> BatchStatus | None:
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def is_finished(self) -> bool:
        return self in {BatchStatus.COMPLETED, BatchStatus.FAILED}


class PhotoStage(str, Enum):
    START = "start"
    PROGRESS = "progress"
    END = "end"

    @classmethod
    def parse(cls, value: PhotoStage | str | None) -> PhotoStage:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.PROGRESS


class TemperatureUnit(str, Enum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"

    @classmethod
    def parse(cls, value: TemperatureUnit | str | None) -> TemperatureUnit | None:
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        normalized = str(value).strip().lower()
        aliases = {"f": cls.FAHRENHEIT, "c": cls.CELSIUS}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            return None


class SortField(str, Enum):
    NAME = "name"
    START_DATE = "start_date"
    STATUS = "status"
    CREATED_AT = "created_at"

    @classmethod
    def parse(cls, value: str | None) -> SortField:
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.CREATED_AT


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> SortOrder:
        if str(value or "").strip().lower() == "asc":
            return cls.ASC
        return cls.DESC
