from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from raugupatis.core.enums import BatchStatus, PhotoStage


class BatchCreate(BaseModel):
    profile_id: int = Field(gt=0)
    name: str = Field(max_length=255)
    start_date: datetime
    target_end_date: datetime | None = None
    notes: str | None = None
    ingredients: str | None = None


class BatchUpdate(BaseModel):
    """Partial update; only fields present in the payload are written.

    An explicit ``None`` clears an optional column.
    """

    profile_id: int | None = Field(default=None, gt=0)
    name: str | None = Field(default=None, max_length=255)
    start_date: datetime | None = None
    target_end_date: datetime | None = None
    actual_end_date: datetime | None = None
    status: str | None = Field(default=None, max_length=20)
    success_rating: int | None = None
    notes: str | None = None
    ingredients: str | None = None
    lessons_learned: str | None = None


class BatchFinish(BaseModel):
    success_rating: int | None = None
    lessons_learned: str | None = None
    taste_profile: str | None = None


class BatchListQuery(BaseModel):
    search: str | None = None
    status: str | None = None
    profile_type: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class BatchRead(BaseModel):
    id: int
    owner_id: int
    profile_id: int
    name: str
    start_date: datetime
    target_end_date: datetime | None = None
    actual_end_date: datetime | None = None
    status: BatchStatus
    success_rating: int | None = None
    notes: str | None = None
    ingredients: str | None = None
    lessons_learned: str | None = None
    created_at: datetime
    updated_at: datetime
    profile_name: str | None = None
    profile_type: str | None = None

    model_config = ConfigDict(from_attributes=True)


class BatchSummaryRead(BatchRead):
    thumbnail_path: str | None = None


class CountdownRead(BaseModel):
    show_countdown: bool
    schedule_finished: bool
    display: str | None = None


class TemperatureLogCreate(BaseModel):
    temperature: float
    unit: str | None = Field(default=None, max_length=20)
    recorded_at: datetime | None = None
    notes: str | None = None


class TemperatureLogRead(BaseModel):
    id: int
    batch_id: int
    recorded_at: datetime
    temperature: float
    notes: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TemperatureReadingDisplay(BaseModel):
    id: int
    recorded_at: datetime
    temperature: float
    unit: str
    unit_symbol: str
    notes: str | None = None


class PhotoCreate(BaseModel):
    file_path: str = Field(min_length=1, max_length=500)
    caption: str | None = None
    taken_at: datetime | None = None
    stage: str | None = Field(default=None, max_length=20)


class PhotoRead(BaseModel):
    id: int
    batch_id: int
    file_path: str
    caption: str | None = None
    taken_at: datetime
    stage: PhotoStage
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TasteProfileCreate(BaseModel):
    profile_text: str
    tasted_at: datetime | None = None


class TasteProfileRead(BaseModel):
    id: int
    batch_id: int
    profile_text: str
    tasted_at: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
