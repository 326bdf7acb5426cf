from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_int, require_digits, require_int, require_non_empty
from ..core.constants import GUARDIAN_PHONE_DIGITS


@dataclass(frozen=True)
class Student:
    """Read model of a student record as served by the backend."""

    id: int
    roll_number: str
    full_name: str
    parent_phone: str
    course_id: Optional[int] = None
    year_id: Optional[int] = None
    branch_id: Optional[int] = None
    section_id: Optional[int] = None
    attendance_percentage: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Student":
        stats = row.get("attendance_stats") or {}
        pct = stats.get("percentage") if isinstance(stats, dict) else None
        try:
            percentage = float(pct) if pct not in (None, "") else None
        except (TypeError, ValueError):
            percentage = None

        return cls(
            id=int(row["id"]),
            roll_number=str(row.get("roll_number") or ""),
            full_name=str(row.get("full_name") or ""),
            parent_phone=str(row.get("parent_phone") or ""),
            course_id=_id(row.get("course_id")),
            year_id=_id(row.get("year_id")),
            branch_id=_id(row.get("branch_id")),
            section_id=_id(row.get("section_id")),
            attendance_percentage=percentage,
        )

    def matches(self, term: str) -> bool:
        term = (term or "").strip().lower()
        if not term:
            return True
        return term in self.full_name.lower() or term in self.roll_number.lower()


@dataclass(frozen=True)
class StudentFilters:
    course_id: Optional[int] = None
    year_id: Optional[int] = None
    branch_id: Optional[int] = None
    section_id: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StudentFilters":
        return cls(
            course_id=optional_int(data.get("course_id")),
            year_id=optional_int(data.get("year_id")),
            branch_id=optional_int(data.get("branch_id")),
            section_id=optional_int(data.get("section_id")),
        )

    def to_params(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @property
    def is_empty(self) -> bool:
        return not self.to_params()


@dataclass(frozen=True)
class StudentForm:
    """Validated create/update payload."""

    full_name: str
    parent_phone: str
    course_id: int
    year_id: int
    branch_id: int
    section_id: int
    roll_number: Optional[str] = None

    @classmethod
    def parse(cls, data: Mapping[str, Any], *, editing: bool = False) -> "StudentForm":
        # Roll number is the record's identity; it cannot change on edit.
        roll_number = None if editing else require_non_empty(data.get("roll_number"), "Roll number")
        return cls(
            roll_number=roll_number,
            full_name=require_non_empty(data.get("full_name"), "Full name"),
            parent_phone=require_digits(data.get("parent_phone"), "Guardian phone", GUARDIAN_PHONE_DIGITS),
            course_id=require_int(data.get("course_id"), "Course"),
            year_id=require_int(data.get("year_id"), "Year"),
            branch_id=require_int(data.get("branch_id"), "Branch"),
            section_id=require_int(data.get("section_id"), "Section"),
        )

    def to_payload(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


def _id(value) -> Optional[int]:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None
