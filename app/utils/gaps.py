from typing import Dict, List, Optional, Sequence, TypedDict

from app.utils.conflict import blocks_by_day
from app.utils.timeslots import DAY_INDEX


class ScheduleStats(TypedDict):
    days_with_class: List[str]
    earliest: Optional[int]
    latest: Optional[int]
    wait_by_day: Dict[str, int]


def _day_wait(arr) -> int:
    return sum(max(0, nxt.start - prev.end) for prev, nxt in zip(arr, arr[1:]))


def idle_score(blocks: Sequence) -> int:
    """
    同一天相鄰兩堂課之間的空堂分鐘數，全部加總（越小越好）
    """
    return sum(_day_wait(arr) for arr in blocks_by_day(blocks).values())


def schedule_stats(blocks: Sequence) -> ScheduleStats:
    """Per-schedule summary for display: class days, first start, last end
    and idle minutes per day. Async blocks are ignored."""
    by_day = blocks_by_day(blocks)
    timed = [b for arr in by_day.values() for b in arr]
    days = sorted(by_day, key=DAY_INDEX.__getitem__)
    return {
        "days_with_class": days,
        "earliest": min((b.start for b in timed), default=None),
        "latest": max((b.end for b in timed), default=None),
        "wait_by_day": {d: _day_wait(by_day[d]) for d in days},
    }
