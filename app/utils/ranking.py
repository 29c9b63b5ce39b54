from typing import List, Sequence

from app.config import settings


def resolve_max_results(value) -> int:
    """非數字或 <= 0 一律回到 settings.DEFAULT_MAX_RESULTS"""
    default = settings.DEFAULT_MAX_RESULTS
    if value is None or isinstance(value, bool):
        return default
    try:
        n = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return n if n > 0 else default


def rank_key(c):
    # score 高的在前，空堂少的在前，學分多的在前
    return (-c.score, c.idle_score, -c.credit_total)


def rank(candidates: Sequence, max_results=None) -> List:
    ordered = sorted(candidates, key=rank_key)
    return ordered[: resolve_max_results(max_results)]
