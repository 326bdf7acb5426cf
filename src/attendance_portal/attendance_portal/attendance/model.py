from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..core.enums import AttendanceStatus, SessionSlot
from ..core.exceptions import ValidationError
from ..students.model import Student

Marks = Mapping[int, AttendanceStatus]


def initial_marks(student_ids: Iterable[int], default: AttendanceStatus = AttendanceStatus.PRESENT) -> dict[int, AttendanceStatus]:
    """Every student on a freshly loaded roster starts with the same status."""
    return {int(sid): default for sid in student_ids}


def apply_marks(marks: Marks, updates: Mapping[Any, Any]) -> dict[int, AttendanceStatus]:
    """Return a new mapping with ``updates`` applied on top of ``marks``."""
    out = dict(marks)
    for raw_id, raw_status in updates.items():
        try:
            student_id = int(raw_id)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid student id: {raw_id}")
        if student_id not in out:
            raise ValidationError(f"Student {student_id} is not on this roster")
        try:
            out[student_id] = AttendanceStatus(raw_status)
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {raw_status}")
    return out


def count_marks(marks: Marks) -> dict[str, int]:
    counts = {s.value: 0 for s in AttendanceStatus}
    for status in marks.values():
        counts[AttendanceStatus(status).value] += 1
    return counts


@dataclass(frozen=True)
class AttendanceSheet:
    """Roster loaded for marking plus the current mark per student."""

    work_date: date
    slot: SessionSlot
    roster: tuple[Student, ...]
    marks: Mapping[int, AttendanceStatus]

    @property
    def counts(self) -> dict[str, int]:
        return count_marks(self.marks)


@dataclass(frozen=True)
class AttendanceSubmission:
    work_date: date
    slot: SessionSlot
    marks: Mapping[int, AttendanceStatus]

    def to_payload(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "session": self.slot.value,
            "attendance_data": [
                {"student_id": int(student_id), "status": AttendanceStatus(status).value}
                for student_id, status in self.marks.items()
            ],
        }


@dataclass(frozen=True)
class AttendanceRecord:
    """One stored mark, as returned by the report endpoint."""

    student_id: int
    status: AttendanceStatus
    full_name: str = ""
    roll_number: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        try:
            status = AttendanceStatus(str(row.get("status", "")).lower())
        except ValueError:
            status = AttendanceStatus.ABSENT
        return cls(
            student_id=student_id_of(row),
            status=status,
            full_name=str(row.get("full_name") or ""),
            roll_number=str(row.get("roll_number") or ""),
        )


@dataclass(frozen=True)
class SummaryRow:
    """Aggregate attendance of one student over a section's sessions."""

    student_id: int
    full_name: str
    roll_number: str
    present: int
    total: int
    percentage: Optional[float]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SummaryRow":
        present = _int(row.get("present")) or _int(row.get("present_count")) or 0
        total = _int(row.get("total")) or _int(row.get("total_sessions")) or 0
        percentage = _float(row.get("percentage"))
        if percentage is None and total:
            percentage = round(present * 100.0 / total, 2)
        return cls(
            student_id=student_id_of(row),
            full_name=str(row.get("full_name") or ""),
            roll_number=str(row.get("roll_number") or ""),
            present=present,
            total=total,
            percentage=percentage,
        )


def student_id_of(row: Mapping[str, Any]) -> Optional[int]:
    """Report rows name the student as ``student_id`` or, in older payloads, ``id``."""
    sid = _int(row.get("student_id"))
    return sid if sid is not None else _int(row.get("id"))


def _int(value) -> Optional[int]:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


def _float(value) -> Optional[float]:
    try:
        return float(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None
