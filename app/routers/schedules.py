# app/routers/schedules.py
import time
from typing import Callable, List, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import StreamingResponse
from io import BytesIO
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.schemas.planner import GenerationConfig
from app.schemas.schedule import GenerateRequest, PreviewRequest, ScheduleCandidateOut
from app.utils.course_store import load_courses, load_settings
from app.utils.excel_export import make_filename, schedules_to_xlsx_bytes
from app.utils.schedule_generator import generate

import logging
logger = logging.getLogger("app.schedules")

router = APIRouter(prefix="/schedules", tags=["Schedules"])


def deadline_after(budget_ms: int) -> Optional[Callable[[], bool]]:
    """
    回傳一個「時間到了沒」的函式給引擎輪詢；budget <= 0 代表不限時
    """
    if budget_ms <= 0:
        return None
    stop_at = time.monotonic() + budget_ms / 1000
    return lambda: time.monotonic() >= stop_at


def _stored_config(db: Session, overrides: Optional[GenerateRequest]) -> GenerationConfig:
    data = load_settings(db).model_dump()
    if overrides is not None:
        data.update(overrides.model_dump(exclude_unset=True))
    return GenerationConfig.model_validate(data)


def _run(courses, config: GenerationConfig):
    start = time.time()
    results = generate(courses, config, should_cancel=deadline_after(settings.GENERATION_TIME_BUDGET_MS))
    ms = int((time.time() - start) * 1000)
    logger.info("generated %d schedules from %d courses (%dms)", len(results), len(courses), ms)
    return results


@router.post("/generate", response_model=List[ScheduleCandidateOut])
def generate_from_saved(
    body: Optional[GenerateRequest] = Body(None),
    db: Session = Depends(get_db),
):
    courses = load_courses(db)
    results = _run(courses, _stored_config(db, body))
    return [ScheduleCandidateOut.from_candidate(c) for c in results]


@router.post("/preview", response_model=List[ScheduleCandidateOut])
def preview(body: PreviewRequest):
    """
    不讀 DB：課程與設定都由 request 帶進來
    """
    results = _run(body.courses, body.config)
    return [ScheduleCandidateOut.from_candidate(c) for c in results]


@router.post("/export")
def export_schedules(
    body: Optional[GenerateRequest] = Body(None),
    db: Session = Depends(get_db),
):
    courses = load_courses(db)
    results = _run(courses, _stored_config(db, body))

    data = schedules_to_xlsx_bytes(results)
    filename = make_filename()
    return StreamingResponse(
        BytesIO(data),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
