from __future__ import annotations

from typing import Optional

from ..api.client import ApiClient, unwrap_list
from .model import AcademicItem


class ApiAcademicRepository:
    def __init__(self, client: ApiClient):
        self._client = client

    def _list(self, path: str, name_key: str, *, token: str, params: Optional[dict] = None) -> list[AcademicItem]:
        rows = unwrap_list(self._client.get(path, token=token, params=params))
        return [AcademicItem.from_row(r, name_key) for r in rows if isinstance(r, dict) and "id" in r]

    def list_years(self, *, token: str) -> list[AcademicItem]:
        return self._list("/academic/years", "year_name", token=token)

    def list_branches(self, *, token: str) -> list[AcademicItem]:
        return self._list("/academic/branches", "branch_name", token=token)

    def list_sections(
        self, *, token: str, year_id: Optional[int] = None, branch_id: Optional[int] = None
    ) -> list[AcademicItem]:
        params = {k: v for k, v in {"year_id": year_id, "branch_id": branch_id}.items() if v is not None}
        return self._list("/academic/sections", "section_name", token=token, params=params or None)

    def list_courses(self, *, token: str) -> list[AcademicItem]:
        return self._list("/academic/courses", "course_name", token=token)

    def list_faculty_sections(self, *, token: str, faculty_id: str) -> list[AcademicItem]:
        return self._list(f"/academic/faculty-sections/{faculty_id}", "section_name", token=token)
