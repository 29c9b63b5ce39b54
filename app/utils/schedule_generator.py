# app/utils/schedule_generator.py
"""
Enumerates conflict-free, credit-bounded course/section combinations.

Base courses (required ones) get exactly one section each via a lazy
cartesian product. Every feasible base combination is then extended with a
depth-first subset search over the optional courses. All accepted nodes are
ranked and truncated by app.utils.ranking.
"""
import itertools
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from app.schemas.planner import GenerationConfig
from app.utils.conflict import has_conflict, violates_min_gap
from app.utils.eligibility import Bundle, MeetingBlock, course_bundles
from app.utils.gaps import idle_score
from app.utils.ranking import rank, resolve_max_results

logger = logging.getLogger("app.generator")

DEFAULT_MIN_CREDITS = 0
DEFAULT_MAX_CREDITS = 999
DEFAULT_MIN_GAP = 0
NODE_CAP_FLOOR = 50
NODE_CAP_FACTOR = 5


@dataclass(frozen=True)
class Selection:
    course: object
    section: object


@dataclass(frozen=True)
class ScheduleCandidate:
    blocks: Tuple[MeetingBlock, ...]
    selections: Tuple[Selection, ...]
    credit_total: int
    score: int
    idle_score: int
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)


@dataclass(frozen=True)
class SearchLimits:
    min_credits: int
    max_credits: int
    min_gap: int
    max_results: int

    @property
    def hard_cap(self) -> int:
        return max(NODE_CAP_FLOOR, self.max_results) * NODE_CAP_FACTOR

    def credits_ok(self, credits: int) -> bool:
        return self.min_credits <= credits <= self.max_credits


def _num_or(value, default: int) -> int:
    # None / 非數字 / 0 都當作沒設定
    if value is None or isinstance(value, bool):
        return default
    try:
        n = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return n or default


def coerce_config(config) -> GenerationConfig:
    """
    Turn a mapping into a GenerationConfig. Fields that still fail validation
    are dropped so their defaults apply; anything that is not a mapping gives
    the default config.
    """
    if isinstance(config, GenerationConfig):
        return config
    if not isinstance(config, Mapping):
        if config is not None:
            logger.warning("generate: ignoring config of type %s", type(config).__name__)
        return GenerationConfig()
    data = dict(config)
    try:
        return GenerationConfig.model_validate(data)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
        logger.warning("generate: dropping invalid config fields %s", sorted(map(str, bad)))
    data = {k: v for k, v in data.items() if k not in bad}
    try:
        return GenerationConfig.model_validate(data)
    except ValidationError:
        return GenerationConfig()


def sanitize_config(config: GenerationConfig) -> SearchLimits:
    return SearchLimits(
        min_credits=_num_or(config.min_credits, DEFAULT_MIN_CREDITS),
        max_credits=_num_or(config.max_credits, DEFAULT_MAX_CREDITS),
        min_gap=_num_or(config.min_gap_minutes, DEFAULT_MIN_GAP),
        max_results=resolve_max_results(config.max_results),
    )


def clean_courses(courses: Sequence) -> List:
    """Drop courses without sections, or with a section that has no meetings."""
    return [
        c for c in courses
        if c.sections and all(len(s.meetings) > 0 for s in c.sections)
    ]


def _credits(course) -> int:
    return int(course.credits or 0)


def _priority(course) -> int:
    return int(course.priority or 0)


class _Search:
    """Holds the mutable state of one run: the accepted nodes and the
    selection stack of the optional-course DFS."""

    def __init__(self, limits: SearchLimits, should_cancel: Optional[Callable[[], bool]]):
        self.limits = limits
        self.should_cancel = should_cancel
        self.accepted: List[ScheduleCandidate] = []
        self.cancelled = False

    @property
    def capped(self) -> bool:
        return len(self.accepted) >= self.limits.hard_cap

    def stopped(self) -> bool:
        if self.capped or self.cancelled:
            return True
        if self.should_cancel is not None and self.should_cancel():
            self.cancelled = True
        return self.cancelled

    def feasible(self, blocks: Sequence[MeetingBlock]) -> bool:
        return not has_conflict(blocks) and not violates_min_gap(blocks, self.limits.min_gap)

    def accept(self, blocks, selections, credits: int) -> None:
        if self.capped:
            return
        blocks = tuple(blocks)
        self.accepted.append(ScheduleCandidate(
            blocks=blocks,
            selections=tuple(selections),
            credit_total=credits,
            score=sum(_priority(s.course) for s in selections),
            idle_score=idle_score(blocks),
        ))

    def extend_optional(self, optional: List[Tuple[object, List[Bundle]]], i: int,
                        blocks: Tuple[MeetingBlock, ...], stack: List[Selection], credits: int,
                        emit: bool = True) -> None:
        # 每個節點都可以是一份完整課表（後面的選修都不選）；
        # 走「不選」分支時選課內容沒變，不重複產生
        if emit and self.limits.credits_ok(credits):
            self.accept(blocks, stack, credits)
        if i >= len(optional) or self.stopped():
            return

        # 不選第 i 門
        self.extend_optional(optional, i + 1, blocks, stack, credits, emit=False)

        course, bundles = optional[i]
        for bundle in bundles:
            if self.stopped():
                break
            new_credits = credits + _credits(course)
            if new_credits > self.limits.max_credits:
                continue
            cand = blocks + bundle.blocks
            if not self.feasible(cand):
                continue
            stack.append(Selection(course, bundle.section))
            try:
                self.extend_optional(optional, i + 1, cand, stack, new_credits)
            finally:
                stack.pop()


def generate(
    courses: Sequence,
    config: GenerationConfig | Mapping | None = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> List[ScheduleCandidate]:
    """
    Return ranked schedule candidates for ``courses`` under ``config``.

    Never raises for bad data: anything infeasible or ineligible simply
    yields fewer (possibly zero) candidates. ``should_cancel`` is polled at
    every decision point; once it returns True the run stops and what was
    accepted so far is ranked and returned.
    """
    config = coerce_config(config)
    limits = sanitize_config(config)

    cleaned = clean_courses(courses)
    required = [c for c in cleaned if c.required]
    optional = [c for c in cleaned if not c.required]

    if required:
        base, extra = required, optional
    elif config.include_optional:
        # 沒有必修時，全部課程都走選修的子集合搜尋
        base, extra = [], optional
    else:
        base, extra = optional, []

    if not base and not extra:
        return []

    base_bundles = [course_bundles(c, config) for c in base]
    if any(len(b) == 0 for b in base_bundles):
        logger.info("generate: a base course has no eligible section, nothing to do")
        return []

    sorted_extra = []
    if config.include_optional:
        # 依 priority 由高到低，同分維持原順序（sorted 是 stable）
        ordered = sorted(extra, key=lambda c: -_priority(c))
        sorted_extra = [(c, course_bundles(c, config)) for c in ordered]

    search = _Search(limits, should_cancel)
    combos_seen = 0

    for combo in itertools.product(*base_bundles):
        if search.stopped():
            break
        combos_seen += 1
        base_blocks = tuple(b for bundle in combo for b in bundle.blocks)
        if not search.feasible(base_blocks):
            continue
        selected_base = [Selection(b.course, b.section) for b in combo]
        base_credits = sum(_credits(b.course) for b in combo)

        if not config.include_optional:
            if limits.credits_ok(base_credits):
                search.accept(base_blocks, selected_base, base_credits)
            continue

        search.extend_optional(sorted_extra, 0, base_blocks, selected_base, base_credits)

    logger.info(
        "generate: %d base combinations, %d accepted (cap=%d%s%s)",
        combos_seen, len(search.accepted), limits.hard_cap,
        ", cap reached" if search.capped else "",
        ", cancelled" if search.cancelled else "",
    )
    return rank(search.accepted, limits.max_results)
