from app.schemas.planner import GenerationConfig
from app.utils.conflict import blocks_by_day, has_conflict, meetings_conflict, violates_min_gap
from app.utils.eligibility import course_bundles
from app.utils.timeslots import ranges_overlap

from conftest import make_course, meeting


def blocks_of(*meetings):
    course = make_course("X", {"1": list(meetings)})
    return list(course_bundles(course, GenerationConfig())[0].blocks)


def test_ranges_overlap_is_half_open():
    assert ranges_overlap(540, 600, 590, 650)
    assert ranges_overlap(540, 700, 600, 650)
    assert not ranges_overlap(540, 600, 600, 660)
    assert not ranges_overlap(600, 660, 540, 600)


def test_conflict_needs_a_shared_day():
    mon, wed, mon_wed = blocks_of(
        meeting(["Mon"], 540, 600),
        meeting(["Wed"], 540, 600),
        meeting(["Mon", "Wed"], 570, 630),
    )
    assert not meetings_conflict(mon, wed)
    assert meetings_conflict(mon, mon_wed)
    assert meetings_conflict(wed, mon_wed)


def test_async_block_never_conflicts():
    timed, web = blocks_of(
        meeting(["Mon"], 540, 600),
        meeting(["Mon"], 540, 600, **{"async": True}),
    )
    assert not meetings_conflict(timed, web)
    assert not has_conflict([timed, web])


def test_has_conflict_checks_every_pair():
    blocks = blocks_of(
        meeting(["Mon"], 540, 600),
        meeting(["Tue"], 540, 600),
        meeting(["Tue"], 599, 660),
    )
    assert has_conflict(blocks)
    assert not has_conflict(blocks[:2])
    assert not has_conflict([])


def test_min_gap_only_between_same_day_neighbours():
    blocks = blocks_of(
        meeting(["Mon"], 540, 600),
        meeting(["Mon", "Tue"], 615, 660),
        meeting(["Wed"], 600, 620),
    )
    assert not violates_min_gap(blocks, 15)
    assert violates_min_gap(blocks, 16)
    assert not violates_min_gap(blocks, 0)


def test_blocks_by_day_sorts_by_start():
    late, early = blocks_of(meeting(["Thu"], 800, 860), meeting(["Thu"], 500, 560))
    assert blocks_by_day([late, early]) == {"Thu": [early, late]}
