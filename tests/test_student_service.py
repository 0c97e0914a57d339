import pytest

from schoolgate.api.errors import APIError, UnauthorizedError
from schoolgate.services.student_service import StudentService
from conftest import ok, fail

SCOPE = [("username", "andi"), ("password", "andi123"), ("role", "student"), ("studentId", "S07")]


@pytest.mark.parametrize("method_name, action", [
    ("get_student_profile", "getStudentProfile"),
    ("get_student_permissions", "getStudentPermissions"),
    ("get_student_attendance", "getStudentAttendance"),
    ("get_student_discipline", "getStudentDiscipline"),
])
def test_reads_are_scoped_to_own_id(student, session, method_name, action):
    session.queue(ok([{"date": "2024-01-05"}]))
    assert getattr(student, method_name)() == [{"date": "2024-01-05"}]
    assert session.last["method"] == "GET"
    assert session.last["params"] == [("action", action)] + SCOPE


def test_request_permission_posts_form(student, session):
    session.queue(ok({"permissionId": "P77"}))
    out = student.request_permission({"type": "sick", "startDate": "2024-02-01", "reason": "Fever"})
    assert out == {"permissionId": "P77"}
    assert session.last["method"] == "POST"
    assert session.last["data"] == [("action", "requestPermission")] + SCOPE + [
        ("type", "sick"), ("startDate", "2024-02-01"), ("reason", "Fever"),
    ]


@pytest.mark.parametrize("call, default", [
    (lambda s: s.get_student_profile(), "Failed to fetch student profile"),
    (lambda s: s.get_student_permissions(), "Failed to fetch student permissions"),
    (lambda s: s.request_permission({}), "Failed to request permission"),
    (lambda s: s.get_student_attendance(), "Failed to fetch student attendance"),
    (lambda s: s.get_student_discipline(), "Failed to fetch student discipline records"),
])
def test_default_failure_messages(student, session, call, default):
    session.queue(fail(""))
    with pytest.raises(APIError) as exc:
        call(student)
    assert exc.value.message == default


def test_teacher_session_cannot_use_student_calls(client, auth, state, session):
    state.set_user({"id": "T01", "username": "bu.sari", "role": "teacher"})
    svc = StudentService(client, auth)
    with pytest.raises(UnauthorizedError):
        svc.get_student_profile()
    with pytest.raises(UnauthorizedError):
        svc.request_permission({"reason": "x"})
    assert session.calls == []


def test_unauthorized_is_an_api_error(client, auth):
    with pytest.raises(APIError):
        StudentService(client, auth).get_student_attendance()
