from __future__ import annotations

from typing import Optional

from ..api.client import ApiClient, unwrap_list
from .model import AttendanceRecord, SummaryRow, student_id_of


class ApiAttendanceRepository:
    def __init__(self, client: ApiClient):
        self._client = client

    def submit(self, payload: dict, *, token: str) -> Optional[dict]:
        data = self._client.post("/attendance", payload, token=token)
        return data if isinstance(data, dict) else None

    def get_report(self, *, token: str, params: dict) -> list[AttendanceRecord]:
        rows = unwrap_list(self._client.get("/attendance/report", token=token, params=params), "records")
        return [AttendanceRecord.from_row(r) for r in rows if _has_id(r)]

    def get_summary(self, *, token: str, section_id: int) -> list[SummaryRow]:
        data = self._client.get("/attendance/summary", token=token, params={"section_id": int(section_id)})
        rows = unwrap_list(data, "summary")
        return [SummaryRow.from_row(r) for r in rows if _has_id(r)]


def _has_id(row) -> bool:
    return isinstance(row, dict) and student_id_of(row) is not None
