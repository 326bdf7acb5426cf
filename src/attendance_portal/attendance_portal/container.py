from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from .academic.api_academic_repository import ApiAcademicRepository
from .academic.service import AcademicService
from .api.client import ApiClient
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.service import AttendanceService
from .auth.guard import SessionGuard
from .auth.service import AuthService
from .auth.store import FlaskSessionTokenStore, TokenStore
from .common.datetime_utils import now_utc, today_local
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS
from .dashboard.service import DashboardService
from .notifications.service import SmsService
from .students.api_student_repository import ApiStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    client: ApiClient

    academic_repo: ApiAcademicRepository
    students_repo: ApiStudentRepository
    attendance_repo: ApiAttendanceRepository

    auth_service: AuthService
    academic_service: AcademicService
    student_service: StudentService
    attendance_service: AttendanceService
    sms_service: SmsService
    dashboard_service: DashboardService

    clock: Callable[[], datetime] = now_utc
    today: Callable[[], date] = today_local

    def session_guard(self, store: TokenStore | None = None) -> SessionGuard:
        """Guard over the current request's credential storage."""
        return SessionGuard(store or FlaskSessionTokenStore(), clock=self.clock)


def build_container(*, api_base_url: str, timeout: float = DEFAULT_API_TIMEOUT_SECONDS, client: ApiClient | None = None) -> Container:
    client = client or ApiClient(api_base_url, timeout=timeout)

    academic_repo = ApiAcademicRepository(client)
    students_repo = ApiStudentRepository(client)
    attendance_repo = ApiAttendanceRepository(client)

    return Container(
        client=client,
        academic_repo=academic_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(client),
        academic_service=AcademicService(academic_repo),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        sms_service=SmsService(client),
        dashboard_service=DashboardService(students_repo, attendance_repo, academic_repo),
    )
