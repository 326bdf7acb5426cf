from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..auth.model import SessionContext
from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus, SessionSlot
from ..core.exceptions import ValidationError
from ..students.model import StudentFilters
from ..students.repository import StudentRepository
from .model import (
    AttendanceRecord,
    AttendanceSheet,
    AttendanceSubmission,
    SummaryRow,
    apply_marks,
    initial_marks,
)
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: load a section roster, mark it and submit it for one session."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._attendance = attendance
        self._students = students
        self._today = today

    def load_sheet(
        self,
        ctx: SessionContext,
        filters: StudentFilters,
        *,
        work_date: Optional[date] = None,
        slot: SessionSlot = SessionSlot.MORNING,
    ) -> AttendanceSheet:
        # Course alone is too broad; refuse to load an unstructured roster.
        if filters.year_id is None and filters.branch_id is None and filters.section_id is None:
            raise ValidationError("Please refine your filters (Year, Branch or Section) to load the roster.")

        work_date = self._check_date(work_date or self._today())
        roster = tuple(self._students.list(token=ctx.token, params=filters.to_params()))
        return AttendanceSheet(work_date=work_date, slot=slot, roster=roster, marks=initial_marks(s.id for s in roster))

    def submit(
        self,
        ctx: SessionContext,
        *,
        work_date: date,
        slot: SessionSlot,
        marks: Mapping[int, AttendanceStatus],
    ) -> Optional[dict]:
        if not marks:
            raise ValidationError("There are no students to submit attendance for")

        submission = AttendanceSubmission(work_date=self._check_date(work_date), slot=slot, marks=dict(marks))
        result = self._attendance.submit(submission.to_payload(), token=ctx.token)
        logger.info(
            "Attendance submitted for %s %s (%d students) by %s",
            submission.work_date.isoformat(),
            slot.value,
            len(submission.marks),
            ctx.claims.subject if ctx.claims else "-",
        )
        return result

    def marks_from_form(self, roster_ids, form: Mapping[str, Any]) -> dict[int, AttendanceStatus]:
        """Rebuild marks from a posted sheet: ``status_<id>`` per listed student."""
        marks = initial_marks(roster_ids)
        updates = {sid: form[f"status_{sid}"] for sid in marks if form.get(f"status_{sid}")}
        return apply_marks(marks, updates)

    def report(self, ctx: SessionContext, *, work_date: date, slot: SessionSlot) -> list[AttendanceRecord]:
        params = {"date": work_date.isoformat(), "session": slot.value}
        return list(self._attendance.get_report(token=ctx.token, params=params))

    def summary(self, ctx: SessionContext, *, section_id: int) -> list[SummaryRow]:
        return list(self._attendance.get_summary(token=ctx.token, section_id=int(section_id)))

    def _check_date(self, work_date: date) -> date:
        if work_date > self._today():
            raise ValidationError("Attendance cannot be marked for a future date")
        return work_date
