from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..academic.model import AcademicItem
from ..academic.repository import AcademicRepository
from ..attendance.repository import AttendanceRepository
from ..auth.model import SessionContext
from ..common.concurrency import gather_independent
from ..core.constants import LOW_ATTENDANCE_PERCENT, MSG_BACKEND_UNREACHABLE, MSG_SYNC_FAILED
from ..core.enums import AttendanceStatus, BackendStatus, Role, SessionSlot
from ..core.exceptions import BackendUnavailableError, DomainError, SessionExpiredError
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    total_students: int = 0
    morning_percent: int = 0
    afternoon_percent: int = 0
    low_attendance_count: int = 0
    backend_status: BackendStatus = BackendStatus.ONLINE
    error: Optional[str] = None
    my_sections: list[AcademicItem] = field(default_factory=list)


def present_percent(present: int, total: int) -> int:
    # Halves round up: 1 of 8 is 13 %.
    return (present * 200 + total) // (2 * total) if total > 0 else 0


class DashboardService:
    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        academic: Optional[AcademicRepository] = None,
        *,
        low_threshold: float = LOW_ATTENDANCE_PERCENT,
    ):
        self._students = students
        self._attendance = attendance
        self._academic = academic
        self._low_threshold = float(low_threshold)

    def build(self, ctx: SessionContext, *, today: date) -> DashboardStats:
        try:
            students = list(self._students.list(token=ctx.token))
        except SessionExpiredError:
            raise
        except BackendUnavailableError as e:
            logger.error("Dashboard roster fetch failed: %s", e)
            return DashboardStats(backend_status=BackendStatus.OFFLINE, error=MSG_BACKEND_UNREACHABLE)
        except DomainError as e:
            logger.error("Dashboard roster fetch failed: %s", e)
            return DashboardStats(backend_status=BackendStatus.OFFLINE, error=MSG_SYNC_FAILED)

        token = ctx.token
        tasks = {
            slot.value: (lambda slot=slot: self._attendance.get_report(
                token=token, params={"date": today.isoformat(), "session": slot.value}
            ))
            for slot in SessionSlot
        }
        if self._academic and ctx.role == Role.FACULTY and ctx.claims.subject:
            tasks["my_sections"] = lambda: self._academic.list_faculty_sections(token=token, faculty_id=ctx.claims.subject)
        result = gather_independent(tasks)

        # Report failures count as "nothing marked yet"; only a rejected session escapes.
        for err in result.failures.values():
            if isinstance(err, SessionExpiredError):
                raise err

        total = len(students)
        present = {
            slot: sum(1 for r in result.get(slot.value, []) if r.status == AttendanceStatus.PRESENT)
            for slot in SessionSlot
        }
        low = sum(
            1 for s in students
            if s.attendance_percentage is not None and s.attendance_percentage < self._low_threshold
        )

        return DashboardStats(
            total_students=total,
            morning_percent=present_percent(present[SessionSlot.MORNING], total),
            afternoon_percent=present_percent(present[SessionSlot.AFTERNOON], total),
            low_attendance_count=low,
            backend_status=BackendStatus.ONLINE,
            my_sections=list(result.get("my_sections", [])),
        )
