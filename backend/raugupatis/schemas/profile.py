from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfileBase(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    type: str = Field(min_length=1, max_length=40)
    min_days: int = Field(ge=0, le=3650)
    max_days: int = Field(ge=0, le=3650)
    temp_min: float
    temp_max: float
    description: str | None = None


class ProfileCreate(ProfileBase):
    pass


class ProfileRead(ProfileBase):
    id: int
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
