# app/utils/conflict.py
from typing import Dict, List, Sequence

from app.utils.timeslots import ranges_overlap


def is_timed(block) -> bool:
    # async 的課沒有固定時段，不參與衝堂 / 間隔判斷
    return bool(block.days) and block.start is not None and block.end is not None


def meetings_conflict(a, b) -> bool:
    """
    判斷兩個時段是否衝堂：
    1. 至少有一天相同
    2. [start, end) 區間有重疊
    """
    if not (is_timed(a) and is_timed(b)):
        return False
    if not set(a.days) & set(b.days):
        return False
    return ranges_overlap(a.start, a.end, b.start, b.end)


def has_conflict(blocks: Sequence) -> bool:
    for i in range(len(blocks)):
        for j in range(i + 1, len(blocks)):
            if meetings_conflict(blocks[i], blocks[j]):
                return True
    return False


def blocks_by_day(blocks: Sequence) -> Dict[str, List]:
    """
    依星期分組並照開始時間排序，只看有固定時段的 block
    """
    by_day: Dict[str, List] = {}
    for b in blocks:
        if not is_timed(b):
            continue
        for d in b.days:
            by_day.setdefault(d, []).append(b)
    for arr in by_day.values():
        arr.sort(key=lambda x: x.start)
    return by_day


def violates_min_gap(blocks: Sequence, min_gap_minutes: int) -> bool:
    """
    同一天相鄰兩堂課之間至少要隔 min_gap_minutes 分鐘
    """
    for arr in blocks_by_day(blocks).values():
        for prev, nxt in zip(arr, arr[1:]):
            if nxt.start - prev.end < min_gap_minutes:
                return True
    return False
