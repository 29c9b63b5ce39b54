from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.planner import CourseIn, GenerationConfig
from app.schemas.settings import GenerationSettingsUpdate
from app.utils.gaps import schedule_stats
from app.utils.timeslots import minutes_to_time12


class MeetingBlockOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str
    course_code: str
    section_label: str
    meeting_id: str
    title: str
    days: List[str] = []
    start: Optional[int] = None
    end: Optional[int] = None
    start_label: str = ""
    end_label: str = ""
    location: str = ""
    mode: str
    is_async: bool = Field(default=False, alias="async")


class SelectionOut(BaseModel):
    course_id: str
    course_code: str
    course_name: str
    section_id: str
    section_label: str
    credits: int
    priority: int
    required: bool


class ScheduleStatsOut(BaseModel):
    days_with_class: List[str]
    earliest: Optional[int] = None
    latest: Optional[int] = None
    wait_by_day: Dict[str, int]


class ScheduleCandidateOut(BaseModel):
    id: str
    score: int
    idle_score: int
    credit_total: int
    selections: List[SelectionOut]
    blocks: List[MeetingBlockOut]
    stats: ScheduleStatsOut

    @classmethod
    def from_candidate(cls, c) -> "ScheduleCandidateOut":
        blocks = [
            MeetingBlockOut(
                course_id=b.course.id,
                course_code=b.course.code,
                section_label=b.section_label,
                meeting_id=b.meeting.id,
                title=b.meeting.title,
                days=list(b.days),
                start=b.start,
                end=b.end,
                start_label=minutes_to_time12(b.start),
                end_label=minutes_to_time12(b.end),
                location=b.meeting.location,
                mode=b.meeting.mode,
                is_async=b.is_async,
            )
            for b in c.blocks
        ]
        selections = [
            SelectionOut(
                course_id=s.course.id,
                course_code=s.course.code,
                course_name=s.course.name,
                section_id=s.section.id,
                section_label=s.section.label,
                credits=s.course.credits,
                priority=s.course.priority,
                required=s.course.required,
            )
            for s in c.selections
        ]
        return cls(
            id=c.id,
            score=c.score,
            idle_score=c.idle_score,
            credit_total=c.credit_total,
            selections=selections,
            blocks=blocks,
            stats=ScheduleStatsOut(**schedule_stats(c.blocks)),
        )


class GenerateRequest(GenerationSettingsUpdate):
    """Per-run overrides on top of the stored generation settings."""


class PreviewRequest(BaseModel):
    courses: List[CourseIn]
    config: GenerationConfig = Field(default_factory=GenerationConfig)
