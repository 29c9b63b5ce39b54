from __future__ import annotations
from typing import List, Dict, Any, Sequence
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Font, Alignment

from app.utils.timeslots import minutes_to_time12

HEADERS = [
    "schedule", "score", "idle_minutes", "credits",
    "course", "section", "title", "days", "start", "end", "location", "mode",
]


def schedule_rows(candidates: Sequence) -> List[Dict[str, Any]]:
    """
    一個 meeting block 一列；schedule 欄位是排名（從 1 開始）
    """
    rows = []
    for rank_no, c in enumerate(candidates, start=1):
        for b in c.blocks:
            rows.append({
                "schedule": rank_no,
                "score": c.score,
                "idle_minutes": c.idle_score,
                "credits": c.credit_total,
                "course": b.course.code,
                "section": b.section_label,
                "title": b.meeting.title,
                "days": "/".join(b.days) if b.days else "async",
                "start": minutes_to_time12(b.start),
                "end": minutes_to_time12(b.end),
                "location": b.meeting.location,
                "mode": b.meeting.mode,
            })
    return rows


def schedules_to_xlsx_bytes(candidates: Sequence, sheet_name: str = "Schedules") -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]

    rows = schedule_rows(candidates)
    if not rows:
        ws.append(["No schedules"])
        buf = BytesIO()
        wb.save(buf)
        return buf.getvalue()

    ws.append(HEADERS)

    # header style
    header_font = Font(bold=True)
    for col_idx, _h in enumerate(HEADERS, start=1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    # data
    for r in rows:
        ws.append([r.get(h) for h in HEADERS])

    # autosize columns
    for col_idx, h in enumerate(HEADERS, start=1):
        max_len = len(str(h))
        for row_idx in range(2, ws.max_row + 1):
            v = ws.cell(row=row_idx, column=col_idx).value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, 60)

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def make_filename(prefix: str = "schedules") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"
