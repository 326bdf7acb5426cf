from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AcademicItem


class AcademicRepository(Protocol):
    """Read-only access to the backend's academic reference data."""

    def list_years(self, *, token: str) -> Sequence[AcademicItem]:
        raise NotImplementedError

    def list_branches(self, *, token: str) -> Sequence[AcademicItem]:
        raise NotImplementedError

    def list_sections(
        self, *, token: str, year_id: Optional[int] = None, branch_id: Optional[int] = None
    ) -> Sequence[AcademicItem]:
        raise NotImplementedError

    def list_courses(self, *, token: str) -> Sequence[AcademicItem]:
        raise NotImplementedError

    def list_faculty_sections(self, *, token: str, faculty_id: str) -> Sequence[AcademicItem]:
        raise NotImplementedError
