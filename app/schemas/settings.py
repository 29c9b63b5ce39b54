from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.config import settings
from app.utils.timeslots import normalize_days


class GenerationSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    max_results: int = Field(default_factory=lambda: settings.DEFAULT_MAX_RESULTS)
    include_optional: bool = True
    min_credits: int = 12
    max_credits: int = 18
    blocked_days: List[str] = Field(default_factory=list)
    earliest_start: Optional[int] = 8 * 60
    latest_end: Optional[int] = 18 * 60
    min_gap_minutes: int = 10


class GenerationSettingsUpdate(BaseModel):
    """
    只更新有給的欄位；earliest_start / latest_end 給 null 代表不限制
    """
    model_config = ConfigDict(extra="forbid")

    max_results: Optional[int] = Field(default=None, ge=1, le=1000)
    include_optional: Optional[bool] = None
    min_credits: Optional[int] = Field(default=None, ge=0)
    max_credits: Optional[int] = Field(default=None, ge=0)
    blocked_days: Optional[List[str]] = None
    earliest_start: Optional[int] = Field(default=None, ge=0, le=1439)
    latest_end: Optional[int] = Field(default=None, ge=0, le=1440)
    min_gap_minutes: Optional[int] = Field(default=None, ge=0)

    @field_validator("blocked_days", mode="before")
    @classmethod
    def _days(cls, v):
        if v is None:
            return None
        return normalize_days(v)
