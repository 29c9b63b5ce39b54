# app/routers/courses.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.course import PlannerCourse
from app.schemas.planner import CourseIn
from app.utils.course_store import (
    fill_course_row, get_course_row, load_courses, next_position, replace_all_courses,
    taken_child_ids,
)
from app.utils.example_courses import example_courses

import logging
logger = logging.getLogger("app.courses")


router = APIRouter(prefix="/courses", tags=["Courses"])


def _check_child_ids(db: Session, body: CourseIn, course_id: str):
    taken = taken_child_ids(db, body, course_id)
    if taken:
        raise HTTPException(status_code=409, detail={"message": "Section or meeting id already in use", **taken})


@router.get("", response_model=List[CourseIn])
def list_courses(db: Session = Depends(get_db)):
    return load_courses(db)


@router.post("", response_model=CourseIn, status_code=201)
def create_course(body: CourseIn, db: Session = Depends(get_db)):
    if db.get(PlannerCourse, body.id):
        raise HTTPException(status_code=409, detail={"message": "Course already exists", "course_id": body.id})
    _check_child_ids(db, body, body.id)

    row = fill_course_row(PlannerCourse(id=body.id, position=next_position(db)), body)
    db.add(row)
    db.commit()
    logger.info("course created id=%s code=%s sections=%d", row.id, row.code, len(body.sections))
    return CourseIn.model_validate(get_course_row(db, row.id))


@router.post("/example", response_model=List[CourseIn])
def load_example_courses(db: Session = Depends(get_db)):
    """
    用範例課程取代目前全部課程
    """
    replace_all_courses(db, example_courses())
    logger.info("course list replaced with example catalogue")
    return load_courses(db)


@router.get("/{course_id}", response_model=CourseIn)
def get_course(course_id: str, db: Session = Depends(get_db)):
    row = get_course_row(db, course_id)
    if not row:
        raise HTTPException(status_code=404, detail="Course not found")
    return CourseIn.model_validate(row)


@router.put("/{course_id}", response_model=CourseIn)
def update_course(course_id: str, body: CourseIn, db: Session = Depends(get_db)):
    row = get_course_row(db, course_id)
    if not row:
        raise HTTPException(status_code=404, detail="Course not found")

    # path 上的 id 為準
    body = body.model_copy(update={"id": course_id})
    _check_child_ids(db, body, course_id)
    fill_course_row(row, body)
    db.commit()
    return CourseIn.model_validate(get_course_row(db, course_id))


@router.delete("/{course_id}")
def delete_course(course_id: str, db: Session = Depends(get_db)):
    row = db.get(PlannerCourse, course_id)
    if not row:
        raise HTTPException(status_code=404, detail="Course not found")

    db.delete(row)
    db.commit()
    return {"message": "Deleted", "course_id": course_id}
