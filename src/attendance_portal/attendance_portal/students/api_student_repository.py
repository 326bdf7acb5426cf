from __future__ import annotations

from typing import Any, Optional

from ..api.client import ApiClient, unwrap_list
from ..core.exceptions import NotFoundError
from .model import Student


class ApiStudentRepository:
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, *, token: str, params: Optional[dict] = None) -> list[Student]:
        rows = unwrap_list(self._client.get("/students", token=token, params=params or None), "students")
        return [Student.from_row(r) for r in rows if isinstance(r, dict) and "id" in r]

    def get(self, student_id: int, *, token: str) -> Student:
        row = _record(self._client.get(f"/students/{int(student_id)}", token=token))
        if row is None:
            raise NotFoundError("Student not found")
        return Student.from_row(row)

    def create(self, payload: dict, *, token: str) -> Optional[Student]:
        row = _record(self._client.post("/students", payload, token=token))
        return Student.from_row(row) if row else None

    def update(self, student_id: int, payload: dict, *, token: str) -> Optional[Student]:
        row = _record(self._client.put(f"/students/{int(student_id)}", payload, token=token))
        return Student.from_row(row) if row else None

    def delete(self, student_id: int, *, token: str) -> None:
        self._client.delete(f"/students/{int(student_id)}", token=token)


def _record(payload: Any) -> Optional[dict]:
    """Single-record responses are either the row itself or wrapped as {"student": {...}}."""
    if not isinstance(payload, dict):
        return None
    for key in ("student", "data"):
        inner = payload.get(key)
        if isinstance(inner, dict):
            payload = inner
            break
    return payload if "id" in payload else None
