from __future__ import annotations

import pytest

from src.attendance_portal.attendance_portal.api.client import ApiClient
from src.attendance_portal.attendance_portal.core.enums import Role
from src.attendance_portal.attendance_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.attendance_portal.attendance_portal.students.api_student_repository import ApiStudentRepository
from src.attendance_portal.attendance_portal.students.model import Student, StudentFilters, StudentForm
from src.attendance_portal.attendance_portal.students.service import StudentService
from tests.helpers import FakeHttp, make_ctx

VALID_FORM = {
    "roll_number": "21CS042",
    "full_name": "  Asha Verma ",
    "parent_phone": "9876543210",
    "course_id": "1",
    "year_id": "2",
    "branch_id": "3",
    "section_id": "4",
}


def _student(id, roll, name, pct=None):
    return Student(id=id, roll_number=roll, full_name=name, parent_phone="9876543210", attendance_percentage=pct)


class InMemoryStudents:
    def __init__(self, students=None):
        self.students = {s.id: s for s in (students or [])}
        self.created: list[dict] = []
        self.updated: list[tuple[int, dict]] = []
        self.deleted: list[int] = []
        self.list_params: list[dict] = []

    def list(self, *, token, params=None):
        self.list_params.append(params)
        return list(self.students.values())

    def get(self, student_id, *, token):
        if student_id not in self.students:
            raise NotFoundError("Student not found")
        return self.students[student_id]

    def create(self, payload, *, token):
        self.created.append(payload)
        return None

    def update(self, student_id, payload, *, token):
        self.updated.append((student_id, payload))
        return None

    def delete(self, student_id, *, token):
        self.deleted.append(student_id)


def test_form_parses_and_normalises():
    form = StudentForm.parse(VALID_FORM)

    assert form.full_name == "Asha Verma"
    assert form.to_payload() == {
        "roll_number": "21CS042",
        "full_name": "Asha Verma",
        "parent_phone": "9876543210",
        "course_id": 1,
        "year_id": 2,
        "branch_id": 3,
        "section_id": 4,
    }


@pytest.mark.parametrize("phone", ["", "12345", "98765432100", "98765x3210"])
def test_guardian_phone_must_be_ten_digits(phone):
    with pytest.raises(ValidationError, match="10 digits"):
        StudentForm.parse({**VALID_FORM, "parent_phone": phone})


@pytest.mark.parametrize("field", ["full_name", "roll_number", "course_id", "year_id", "branch_id", "section_id"])
def test_required_fields(field):
    with pytest.raises(ValidationError):
        StudentForm.parse({**VALID_FORM, field: ""})


def test_roll_number_is_ignored_on_edit():
    form = StudentForm.parse({**VALID_FORM, "roll_number": "CHANGED"}, editing=True)

    assert "roll_number" not in form.to_payload()


def test_filters_omit_empty_values():
    filters = StudentFilters.from_mapping({"year_id": "2", "branch_id": "", "section_id": " 4 "})

    assert filters.to_params() == {"year_id": 2, "section_id": 4}
    assert not filters.is_empty
    assert StudentFilters.from_mapping({}).is_empty


def test_non_numeric_filter_is_rejected():
    with pytest.raises(ValidationError):
        StudentFilters.from_mapping({"year_id": "abc"})


def test_list_passes_filters_and_searches_locally():
    repo = InMemoryStudents([_student(1, "21CS001", "Asha Verma"), _student(2, "21CS002", "Ravi Kumar")])
    svc = StudentService(repo)

    rows = svc.list_students(make_ctx(), StudentFilters(section_id=4), search="RAVI")

    assert [s.id for s in rows] == [2]
    assert repo.list_params == [{"section_id": 4}]


def test_search_matches_roll_number_case_insensitively():
    students = [_student(1, "21CS001", "Asha"), _student(2, "21EE002", "Ravi")]

    assert [s.id for s in StudentService.search(students, "ee0")] == [2]
    assert len(StudentService.search(students, "  ")) == 2


def test_faculty_cannot_create_or_delete():
    repo = InMemoryStudents()
    svc = StudentService(repo)
    ctx = make_ctx(Role.FACULTY)

    with pytest.raises(AuthorizationError):
        svc.create_student(ctx, VALID_FORM)
    with pytest.raises(AuthorizationError):
        svc.delete_student(ctx, 1)

    assert repo.created == [] and repo.deleted == []


def test_admin_creates_and_deletes():
    repo = InMemoryStudents()
    svc = StudentService(repo)
    ctx = make_ctx(Role.ADMIN, subject="1")

    svc.create_student(ctx, VALID_FORM)
    svc.delete_student(ctx, "5")

    assert repo.created[0]["roll_number"] == "21CS042"
    assert repo.deleted == [5]


def test_invalid_form_never_reaches_backend():
    repo = InMemoryStudents()

    with pytest.raises(ValidationError):
        StudentService(repo).create_student(make_ctx(Role.ADMIN), {**VALID_FORM, "parent_phone": "123"})

    assert repo.created == []


def test_update_keeps_roll_number_out_of_payload():
    repo = InMemoryStudents()

    StudentService(repo).update_student(make_ctx(), 9, VALID_FORM)

    student_id, payload = repo.updated[0]
    assert student_id == 9
    assert "roll_number" not in payload


def test_api_repository_reads_wrapped_rows():
    base = "http://backend.test/api"
    http = FakeHttp(
        base,
        {
            ("GET", "/students"): (
                200,
                {"students": [{"id": 1, "roll_number": "21CS001", "full_name": "Asha", "attendance_stats": {"percentage": "62.5"}}, {"bad": 1}]},
            ),
            ("GET", "/students/1"): (200, {"student": {"id": 1, "roll_number": "21CS001", "full_name": "Asha"}}),
            ("GET", "/students/2"): (200, {}),
        },
    )
    repo = ApiStudentRepository(ApiClient(base, http=http))

    rows = repo.list(token="abc", params={"year_id": 2})
    assert [(s.id, s.attendance_percentage) for s in rows] == [(1, 62.5)]
    assert repo.get(1, token="abc").full_name == "Asha"
    with pytest.raises(NotFoundError):
        repo.get(2, token="abc")
