import uuid
from typing import Any, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.timeslots import MINUTES_PER_DAY, normalize_days, parse_time12, time_to_minutes

MeetingMode = Literal["in-person", "online-synchronous", "online-asynchronous"]


def new_id() -> str:
    return str(uuid.uuid4())


def _coerce_minutes(v: Any) -> Optional[int]:
    """
    接受分鐘數 (540) 或文字 ("09:00"、"9:00 AM")
    """
    if v is None or v == "":
        return None
    if isinstance(v, bool):
        raise ValueError("time must be minutes or a time string")
    if isinstance(v, (int, float)):
        mins = int(v)
    elif str(v).strip().isdigit():
        mins = int(str(v).strip())
    else:
        mins = parse_time12(str(v))
        if mins is None:
            mins = time_to_minutes(v)
        if mins is None:
            raise ValueError(f"cannot parse time: {v!r}")
    if not 0 <= mins < MINUTES_PER_DAY:
        raise ValueError("time must be within 00:00-23:59")
    return mins


def _loose_int(v: Any) -> Optional[int]:
    """
    設定值給錯型別時不報錯，交給排課引擎套預設值
    """
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(float(v))
    except (TypeError, ValueError, OverflowError):
        return None


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _loose_bool(v: Any, default: bool) -> bool:
    """
    "yes" / 1 / "false" 這類都認得，其他一律用預設值
    """
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)) and v in (0, 1):
        return bool(v)
    if isinstance(v, str):
        s = v.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
    return default


class MeetingIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str = Field(default_factory=new_id)
    title: str = "Lecture"
    days: List[str] = Field(default_factory=list)
    start: Optional[int] = None
    end: Optional[int] = None
    location: str = ""
    mode: MeetingMode = "in-person"
    is_async: bool = Field(default=False, alias="async")

    @field_validator("days", mode="before")
    @classmethod
    def _days(cls, v):
        return normalize_days(v)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _times(cls, v):
        return _coerce_minutes(v)


class SectionIn(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=new_id)
    label: str = "001"
    meetings: List[MeetingIn] = Field(default_factory=list)


class CourseIn(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=new_id)
    code: str = ""
    name: str = ""
    credits: int = Field(default=3, ge=0)
    required: bool = False
    priority: int = Field(default=3, ge=1, le=5)
    sections: List[SectionIn] = Field(default_factory=list)


class GenerationConfig(BaseModel):
    """
    Immutable input of one generation run.

    Numeric fields accept anything; values that are not numbers become None
    and the engine replaces them with its defaults.
    """
    model_config = ConfigDict(frozen=True)

    min_credits: Optional[int] = None
    max_credits: Optional[int] = None
    max_results: Optional[int] = None
    include_optional: bool = True
    blocked_days: List[str] = Field(default_factory=list)
    earliest_start: Optional[int] = None
    latest_end: Optional[int] = None
    min_gap_minutes: Optional[int] = None

    @field_validator("min_credits", "max_credits", "max_results", "min_gap_minutes", mode="before")
    @classmethod
    def _numbers(cls, v):
        return _loose_int(v)

    @field_validator("earliest_start", "latest_end", mode="before")
    @classmethod
    def _bounds(cls, v):
        if isinstance(v, str):
            mins = parse_time12(v)
            if mins is not None:
                return mins
        return _loose_int(v)

    @field_validator("include_optional", mode="before")
    @classmethod
    def _include(cls, v):
        return _loose_bool(v, True)

    @field_validator("blocked_days", mode="before")
    @classmethod
    def _blocked(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        if not v or not isinstance(v, Iterable):
            return []
        # 不認得的星期直接忽略，不擋整個請求
        days = []
        for d in v:
            try:
                days.extend(normalize_days([d]))
            except (TypeError, ValueError):
                continue
        return normalize_days(days)
