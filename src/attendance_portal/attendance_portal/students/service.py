from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..auth.model import SessionContext
from ..core.exceptions import AuthorizationError
from .model import Student, StudentFilters, StudentForm
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: browse and maintain the student roster (admin for create/delete)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(
        self,
        ctx: SessionContext,
        filters: Optional[StudentFilters] = None,
        *,
        search: str = "",
    ) -> list[Student]:
        filters = filters or StudentFilters()
        rows = self._students.list(token=ctx.token, params=filters.to_params())
        return self.search(rows, search)

    @staticmethod
    def search(students, term: str) -> list[Student]:
        return [s for s in students if s.matches(term)]

    def get_student(self, ctx: SessionContext, student_id: int) -> Student:
        return self._students.get(int(student_id), token=ctx.token)

    def create_student(self, ctx: SessionContext, data: Mapping[str, Any]) -> Optional[Student]:
        if not ctx.is_admin:
            raise AuthorizationError("Only administrators can register students")

        form = StudentForm.parse(data)
        created = self._students.create(form.to_payload(), token=ctx.token)
        logger.info("Student %s registered by %s", form.roll_number, ctx.claims.subject)
        return created

    def update_student(self, ctx: SessionContext, student_id: int, data: Mapping[str, Any]) -> Optional[Student]:
        form = StudentForm.parse(data, editing=True)
        return self._students.update(int(student_id), form.to_payload(), token=ctx.token)

    def delete_student(self, ctx: SessionContext, student_id: int) -> None:
        if not ctx.is_admin:
            raise AuthorizationError("Only administrators can delete students")

        self._students.delete(int(student_id), token=ctx.token)
        logger.info("Student %s deleted by %s", student_id, ctx.claims.subject)
