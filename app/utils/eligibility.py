# app/utils/eligibility.py
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class MeetingBlock:
    """A meeting annotated with the course and section it belongs to.

    Async meetings are carried with empty days and no times so they show up
    in results but never take part in conflict or gap checks.
    """

    meeting: object
    course: object
    section_label: str
    days: Tuple[str, ...]
    start: Optional[int]
    end: Optional[int]

    @property
    def is_async(self) -> bool:
        return is_async(self.meeting)


@dataclass(frozen=True)
class Bundle:
    course: object
    section: object
    blocks: Tuple[MeetingBlock, ...]


def is_async(meeting) -> bool:
    return bool(getattr(meeting, "is_async", False)) or getattr(meeting, "mode", None) == "online-asynchronous"


def is_valid_timed(meeting) -> bool:
    if is_async(meeting):
        return False
    if not meeting.days:
        return False
    if meeting.start is None or meeting.end is None:
        return False
    return meeting.start < meeting.end


def is_eligible(meeting, config) -> bool:
    """
    config 只需要 blocked_days / earliest_start / latest_end
    """
    if is_async(meeting):
        return True
    if not is_valid_timed(meeting):
        return False
    blocked = set(config.blocked_days or [])
    if any(d in blocked for d in meeting.days):
        return False
    if config.earliest_start is not None and meeting.start < config.earliest_start:
        return False
    if config.latest_end is not None and meeting.end > config.latest_end:
        return False
    return True


def section_eligible(section, config) -> bool:
    return all(is_eligible(m, config) for m in section.meetings)


def to_block(meeting, course, section) -> MeetingBlock:
    if is_async(meeting):
        return MeetingBlock(meeting, course, section.label, (), None, None)
    return MeetingBlock(meeting, course, section.label, tuple(meeting.days), meeting.start, meeting.end)


def course_bundles(course, config) -> List[Bundle]:
    """
    每個可用的 section 一個 bundle，順序跟 section 宣告順序一樣
    """
    out = []
    for sec in course.sections:
        if not section_eligible(sec, config):
            continue
        blocks = tuple(to_block(m, course, sec) for m in sec.meetings)
        out.append(Bundle(course=course, section=sec, blocks=blocks))
    return out
