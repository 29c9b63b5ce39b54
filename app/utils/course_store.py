# app/utils/course_store.py
from typing import Dict, List, Optional

from sqlalchemy.orm import Session, object_session, selectinload

from app.models.course import PlannerCourse
from app.models.section import CourseSection
from app.models.course_time import SectionMeeting
from app.models.generation_setting import GenerationSetting
from app.schemas.planner import CourseIn
from app.schemas.settings import GenerationSettingsOut

SETTINGS_ROW_ID = 1


def _query_courses(db: Session):
    return (
        db.query(PlannerCourse)
        .options(selectinload(PlannerCourse.sections).selectinload(CourseSection.meetings))
        .order_by(PlannerCourse.position.asc(), PlannerCourse.id.asc())
    )


def load_courses(db: Session) -> List[CourseIn]:
    return [CourseIn.model_validate(c) for c in _query_courses(db).all()]


def get_course_row(db: Session, course_id: str) -> Optional[PlannerCourse]:
    return _query_courses(db).filter(PlannerCourse.id == course_id).first()


def fill_course_row(row: PlannerCourse, body: CourseIn) -> PlannerCourse:
    """
    把 CourseIn 寫進 ORM，sections / meetings 整批換掉（保留原本的 id）
    """
    db = object_session(row)
    if db is not None and row.sections:
        # 先把舊的 sections 刪掉，避免同 id 的新舊物件在同一次 flush 撞在一起
        row.sections.clear()
        db.flush()

    row.code = body.code
    row.name = body.name
    row.credits = body.credits
    row.required = body.required
    row.priority = body.priority

    row.sections = [
        CourseSection(
            id=sec.id,
            label=sec.label,
            position=si,
            meetings=[
                SectionMeeting(
                    id=m.id,
                    title=m.title,
                    days=list(m.days),
                    start=m.start,
                    end=m.end,
                    location=m.location,
                    mode=m.mode,
                    is_async=m.is_async,
                    position=mi,
                )
                for mi, m in enumerate(sec.meetings)
            ],
        )
        for si, sec in enumerate(body.sections)
    ]
    return row


def _dupes(ids: List[str]) -> set:
    seen, out = set(), set()
    for i in ids:
        if i in seen:
            out.add(i)
        seen.add(i)
    return out


def taken_child_ids(db: Session, body: CourseIn, course_id: str) -> Dict[str, List[str]]:
    """
    section / meeting id 是 client 給的：找出 body 內重複的，
    或已經屬於別門課的 id。空 dict 代表可以寫入
    """
    section_ids = [s.id for s in body.sections]
    meeting_ids = [m.id for s in body.sections for m in s.meetings]

    bad_sections = _dupes(section_ids)
    bad_meetings = _dupes(meeting_ids)
    if section_ids:
        bad_sections.update(
            sid for (sid,) in db.query(CourseSection.id)
            .filter(CourseSection.id.in_(section_ids), CourseSection.course_id != course_id)
        )
    if meeting_ids:
        bad_meetings.update(
            mid for (mid,) in db.query(SectionMeeting.id)
            .join(CourseSection, SectionMeeting.section_id == CourseSection.id)
            .filter(SectionMeeting.id.in_(meeting_ids), CourseSection.course_id != course_id)
        )

    out = {}
    if bad_sections:
        out["section_ids"] = sorted(bad_sections)
    if bad_meetings:
        out["meeting_ids"] = sorted(bad_meetings)
    return out


def next_position(db: Session) -> int:
    last = db.query(PlannerCourse.position).order_by(PlannerCourse.position.desc()).first()
    return (last[0] + 1) if last else 0


def replace_all_courses(db: Session, courses: List[CourseIn]) -> None:
    for row in db.query(PlannerCourse).all():
        db.delete(row)
    db.flush()
    for i, c in enumerate(courses):
        db.add(fill_course_row(PlannerCourse(id=c.id, position=i), c))
    db.commit()


def load_settings(db: Session) -> GenerationSettingsOut:
    # 還沒存過設定就回傳預設值
    row = db.get(GenerationSetting, SETTINGS_ROW_ID)
    if row is None:
        return GenerationSettingsOut()
    return GenerationSettingsOut.model_validate(row)


def save_settings(db: Session, changes: dict) -> GenerationSettingsOut:
    row = db.get(GenerationSetting, SETTINGS_ROW_ID)
    if row is None:
        row = GenerationSetting(id=SETTINGS_ROW_ID, **GenerationSettingsOut().model_dump())
        db.add(row)
    for k, v in changes.items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return GenerationSettingsOut.model_validate(row)
