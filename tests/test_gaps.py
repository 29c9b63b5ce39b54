from app.schemas.planner import GenerationConfig
from app.utils.eligibility import course_bundles
from app.utils.gaps import idle_score, schedule_stats

from conftest import make_course, meeting


def blocks_of(*meetings):
    course = make_course("X", {"1": list(meetings)})
    return list(course_bundles(course, GenerationConfig())[0].blocks)


def test_idle_score_sums_gaps_per_day():
    blocks = blocks_of(
        meeting(["Mon", "Wed"], 540, 600),
        meeting(["Mon"], 660, 720),
        meeting(["Wed"], 630, 700),
        meeting(["Fri"], 900, 960),
    )
    # Mon 60 + Wed 30，Fri 只有一堂
    assert idle_score(blocks) == 90


def test_idle_score_ignores_async_and_overlap():
    blocks = blocks_of(
        meeting(["Tue"], 540, 600),
        meeting(["Tue"], 580, 640),
        meeting([], **{"async": True}),
    )
    assert idle_score(blocks) == 0
    assert idle_score([]) == 0


def test_schedule_stats():
    blocks = blocks_of(
        meeting(["Wed", "Mon"], 540, 600),
        meeting(["Mon"], 660, 720),
        meeting([], **{"async": True}),
    )
    stats = schedule_stats(blocks)

    assert stats["days_with_class"] == ["Mon", "Wed"]
    assert stats["earliest"] == 540
    assert stats["latest"] == 720
    assert stats["wait_by_day"] == {"Mon": 60, "Wed": 0}


def test_schedule_stats_of_async_only_schedule():
    stats = schedule_stats(blocks_of(meeting([], **{"async": True})))
    assert stats == {"days_with_class": [], "earliest": None, "latest": None, "wait_by_day": {}}
