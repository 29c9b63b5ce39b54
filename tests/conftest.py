import os
import tempfile

import pytest

# 要在 import app 之前設定，讓 app.config 讀到測試用的 sqlite
_tmp = tempfile.mkdtemp(prefix="schedule-builder-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp, 'test.db')}"
os.environ["LOG_DIR"] = os.path.join(_tmp, "logs")

from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.schemas.planner import CourseIn  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def meeting(days, start=None, end=None, **kw):
    data = {"days": days, "start": start, "end": end}
    data.update(kw)
    return data


def make_course(code, sections, credits=3, required=False, priority=3):
    """
    sections: {label: [meeting(...), ...]}
    """
    return CourseIn.model_validate({
        "code": code,
        "name": code,
        "credits": credits,
        "required": required,
        "priority": priority,
        "sections": [
            {"label": label, "meetings": meetings}
            for label, meetings in sections.items()
        ],
    })
