from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AcademicItem:
    """One entry of reference metadata (year, branch, section or course)."""

    id: int
    name: str
    year_id: Optional[int] = None
    branch_id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any], name_key: str) -> "AcademicItem":
        name = row.get(name_key) or row.get("name") or str(row.get("id", ""))
        return cls(
            id=int(row["id"]),
            name=str(name),
            year_id=_maybe_int(row.get("year_id")),
            branch_id=_maybe_int(row.get("branch_id")),
        )


@dataclass(frozen=True)
class AcademicMetadata:
    """Reference lists for filters and registration forms.

    ``failed`` names the lists that could not be loaded; they are empty here.
    """

    years: list[AcademicItem] = field(default_factory=list)
    branches: list[AcademicItem] = field(default_factory=list)
    sections: list[AcademicItem] = field(default_factory=list)
    courses: list[AcademicItem] = field(default_factory=list)
    failed: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failed


def _maybe_int(value) -> Optional[int]:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None
