import re
from typing import Iterable, List, Optional

DAY_ORDER = ["Mon", "Tue", "Wed", "Thu", "Fri"]
DAY_INDEX = {d: i for i, d in enumerate(DAY_ORDER)}

MINUTES_PER_DAY = 24 * 60

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")
_12H = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(AM|PM)$")


def _in_day(h: int, m: int) -> bool:
    return 0 <= h <= 23 and 0 <= m <= 59


def time_to_minutes(t) -> Optional[int]:
    """
    "09:30" -> 570，空字串 / 格式錯誤 -> None
    """
    if t is None or t == "":
        return None
    parts = str(t).split(":")
    if len(parts) != 2:
        return None
    try:
        h, m = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return h * 60 + m


def minutes_to_time(mins: Optional[int]) -> str:
    if mins is None:
        return ""
    return f"{mins // 60:02d}:{mins % 60:02d}"


def minutes_to_time12(mins: Optional[int]) -> str:
    """570 -> '9:30 AM', 780 -> '1:00 PM'"""
    if mins is None:
        return ""
    total_h = mins // 60
    ampm = "PM" if total_h >= 12 else "AM"
    h = 12 if total_h % 12 == 0 else total_h % 12
    return f"{h}:{mins % 60:02d} {ampm}"


def parse_time12(text: Optional[str]) -> Optional[int]:
    """
    使用者輸入的時間 -> 分鐘數
    支援 "13:00"、"9:00 AM"、"9:00am"、"9am"、"9 AM"
    """
    if not text:
        return None
    s = text.strip().upper()

    m = _HHMM.match(s)
    if m:
        h, mi = int(m.group(1)), int(m.group(2))
        if _in_day(h, mi):
            return h * 60 + mi

    m = _12H.match(s)
    if m:
        h = int(m.group(1))
        mi = int(m.group(2)) if m.group(2) else 0
        if m.group(3) == "AM" and h == 12:
            h = 0
        if m.group(3) == "PM" and h != 12:
            h += 12
        if _in_day(h, mi):
            return h * 60 + mi
    return None


def normalize_days(days: Iterable[str] | None) -> List[str]:
    """
    ["wed", "Mon", "Mon"] -> ["Mon", "Wed"]
    不認得的星期會丟 ValueError（給 schema validator 用）
    """
    if not days:
        return []
    if isinstance(days, str):
        days = days.split(",")
    out = set()
    for d in days:
        key = str(d or "").strip()[:3].capitalize()
        if not key:
            continue
        if key not in DAY_INDEX:
            raise ValueError(f"unknown weekday: {d!r}")
        out.add(key)
    # 去重 + 依星期排序
    return sorted(out, key=DAY_INDEX.__getitem__)


def ranges_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """
    Half-open [start, end) overlap. A meeting ending exactly when another
    starts is not an overlap.
    """
    return a_start < b_end and b_start < a_end
