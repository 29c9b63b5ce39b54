from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.settings import GenerationSettingsOut, GenerationSettingsUpdate
from app.utils.course_store import load_settings, save_settings

import logging
logger = logging.getLogger("app.settings")

router = APIRouter(prefix="/settings", tags=["Generation Settings"])


@router.get("", response_model=GenerationSettingsOut)
def get_settings(db: Session = Depends(get_db)):
    return load_settings(db)


@router.put("", response_model=GenerationSettingsOut)
def update_settings(body: GenerationSettingsUpdate, db: Session = Depends(get_db)):
    changes = body.model_dump(exclude_unset=True)
    # null 只對時間上下限有意義（= 不限制）
    changes = {
        k: v for k, v in changes.items()
        if v is not None or k in ("earliest_start", "latest_end")
    }
    out = save_settings(db, changes)
    logger.info("generation settings updated: %s", sorted(changes))
    return out
