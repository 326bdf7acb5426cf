from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, SummaryRow


class AttendanceRepository(Protocol):
    def submit(self, payload: dict, *, token: str) -> Optional[dict]:
        raise NotImplementedError

    def get_report(self, *, token: str, params: dict) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_summary(self, *, token: str, section_id: int) -> Sequence[SummaryRow]:
        raise NotImplementedError
