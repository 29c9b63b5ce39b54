"""Starter catalogue loaded by ``POST /courses/example``."""
from typing import List

from app.schemas.planner import CourseIn


def _m(title, days, start, end, location, mode="in-person", is_async=False):
    return {
        "title": title, "days": days, "start": start, "end": end,
        "location": location, "mode": mode, "async": is_async,
    }


EXAMPLE_COURSES = [
    {
        "code": "MTH-101", "name": "College Algebra", "credits": 3, "required": True, "priority": 5,
        "sections": [
            {"label": "001", "meetings": [
                _m("Lecture", ["Mon", "Wed"], 540, 615, "Wells Hall A216"),
                _m("Recitation", ["Fri"], 600, 650, "Bessey 110"),
            ]},
            {"label": "002", "meetings": [
                _m("Lecture", ["Tue", "Thu"], 660, 735, "Wells Hall A216"),
                _m("Recitation", ["Fri"], 780, 830, "Bessey 110"),
            ]},
        ],
    },
    {
        "code": "ENG-201", "name": "Writing & Rhetoric", "credits": 3, "required": False, "priority": 3,
        "sections": [
            {"label": "003", "meetings": [
                _m("Lecture", ["Mon", "Wed"], 630, 705, "Online", mode="online-synchronous"),
            ]},
            {"label": "004", "meetings": [
                _m("Lecture", [], None, None, "Online", mode="online-asynchronous", is_async=True),
            ]},
        ],
    },
    {
        "code": "CIS-150", "name": "Intro to Programming", "credits": 4, "required": True, "priority": 4,
        "sections": [
            {"label": "A", "meetings": [
                _m("Lecture", ["Tue", "Thu"], 540, 620, "Engineering 120"),
                _m("Lab", ["Thu"], 840, 950, "Computer Lab 2"),
            ]},
            {"label": "B", "meetings": [
                _m("Lecture", ["Mon", "Wed"], 780, 860, "Engineering 120"),
                _m("Lab", ["Wed"], 900, 1010, "Computer Lab 3"),
            ]},
        ],
    },
    {
        "code": "SOC-110", "name": "Intro Sociology", "credits": 3, "required": False, "priority": 2,
        "sections": [
            {"label": "A", "meetings": [
                _m("Lecture", ["Mon", "Wed", "Fri"], 840, 890, "Wells Hall B101"),
            ]},
        ],
    },
]


def example_courses() -> List[CourseIn]:
    # 每次都產生新的 id
    return [CourseIn.model_validate(c) for c in EXAMPLE_COURSES]
