from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Student roster as owned by the backend."""

    def list(self, *, token: str, params: Optional[dict] = None) -> Sequence[Student]:
        raise NotImplementedError

    def get(self, student_id: int, *, token: str) -> Student:
        raise NotImplementedError

    def create(self, payload: dict, *, token: str) -> Optional[Student]:
        raise NotImplementedError

    def update(self, student_id: int, payload: dict, *, token: str) -> Optional[Student]:
        raise NotImplementedError

    def delete(self, student_id: int, *, token: str) -> None:
        raise NotImplementedError
