import pytest

from schoolgate.api.errors import APIError, UnauthorizedError
from schoolgate.services.teacher_service import TeacherService
from conftest import ok, fail

CREDS = [("username", "bu.sari"), ("password", "rahasia"), ("role", "teacher")]


def _fields(call):
    return call.get("params") if call["method"] == "GET" else call.get("data")


@pytest.mark.parametrize("method_name, action", [
    ("get_student_stats", "getStudentStats"),
    ("get_students", "getStudents"),
    ("get_permissions", "getPermissions"),
    ("get_violation_types", "getViolationTypes"),
    ("get_discipline_points", "getDisciplinePoints"),
])
def test_reads_are_gets_with_credentials(teacher, session, method_name, action):
    session.queue(ok({"rows": 3}))
    assert getattr(teacher, method_name)() == {"rows": 3}
    assert session.last["method"] == "GET"
    assert _fields(session.last) == [("action", action)] + CREDS


def test_add_student_appends_fields_after_credentials(teacher, session):
    session.queue(ok({"id": "S09"}))
    out = teacher.add_student({"name": "Budi", "class": "7A"})
    assert out == {"id": "S09"}
    assert session.last["method"] == "POST"
    assert _fields(session.last) == [("action", "addStudent")] + CREDS + [("name", "Budi"), ("class", "7A")]


def test_update_student_sends_id_before_data(teacher, session):
    teacher.update_student("S09", {"class": "8B"})
    assert _fields(session.last) == [("action", "updateStudent")] + CREDS + [("studentId", "S09"), ("class", "8B")]


def test_delete_student(teacher, session):
    teacher.delete_student(12)
    assert session.last["method"] == "POST"
    assert _fields(session.last) == [("action", "deleteStudent")] + CREDS + [("studentId", "12")]


def test_approve_permission_carries_teacher_id(teacher, session):
    teacher.approve_permission("P5")
    assert _fields(session.last) == [("action", "approvePermission")] + CREDS + [
        ("permissionId", "P5"), ("teacherId", "T01"),
    ]


def test_reject_permission_defaults_to_empty_notes(teacher, session):
    teacher.reject_permission("P5")
    assert _fields(session.last)[-3:] == [("permissionId", "P5"), ("teacherId", "T01"), ("notes", "")]

    teacher.reject_permission("P6", notes="No letter from parents")
    assert _fields(session.last)[-1] == ("notes", "No letter from parents")


def test_add_discipline_point_puts_teacher_id_first(teacher, session):
    teacher.add_discipline_point({"studentId": "S07", "violationTypeId": "V2", "points": 5})
    assert _fields(session.last) == [("action", "addDisciplinePoint")] + CREDS + [
        ("teacherId", "T01"), ("studentId", "S07"), ("violationTypeId", "V2"), ("points", "5"),
    ]


@pytest.mark.parametrize("student_id", [None, "", 0])
def test_discipline_points_without_filter(teacher, session, student_id):
    teacher.get_discipline_points(student_id)
    assert _fields(session.last) == [("action", "getDisciplinePoints")] + CREDS


def test_discipline_points_filtered_by_student(teacher, session):
    teacher.get_discipline_points("S07")
    assert _fields(session.last)[-1] == ("studentId", "S07")


@pytest.mark.parametrize("call, default", [
    (lambda t: t.get_student_stats(), "Failed to fetch student statistics"),
    (lambda t: t.get_students(), "Failed to fetch students"),
    (lambda t: t.add_student({}), "Failed to add student"),
    (lambda t: t.update_student(1, {}), "Failed to update student"),
    (lambda t: t.delete_student(1), "Failed to delete student"),
    (lambda t: t.get_permissions(), "Failed to fetch permissions"),
    (lambda t: t.approve_permission(1), "Failed to approve permission"),
    (lambda t: t.reject_permission(1), "Failed to reject permission"),
    (lambda t: t.get_violation_types(), "Failed to fetch violation types"),
    (lambda t: t.add_discipline_point({}), "Failed to add discipline points"),
    (lambda t: t.get_discipline_points(), "Failed to fetch discipline points"),
])
def test_default_failure_messages(teacher, session, call, default):
    session.queue(fail())
    with pytest.raises(APIError) as exc:
        call(teacher)
    assert exc.value.message == default


def test_server_message_wins(teacher, session):
    session.queue(fail("Student not found"))
    with pytest.raises(APIError, match="Student not found"):
        teacher.delete_student("S404")


def test_student_session_cannot_use_teacher_calls(client, auth, state, session):
    state.set_user({"id": "S07", "username": "andi", "role": "student"})
    svc = TeacherService(client, auth)
    with pytest.raises(UnauthorizedError, match="Unauthorized access"):
        svc.get_students()
    with pytest.raises(UnauthorizedError):
        svc.approve_permission("P1")
    assert session.calls == []


def test_logged_out_cannot_use_teacher_calls(client, auth, session):
    with pytest.raises(UnauthorizedError):
        TeacherService(client, auth).get_student_stats()
    assert session.calls == []


def test_placeholder_token_when_no_credential(teacher, state, session, monkeypatch):
    from schoolgate import config
    monkeypatch.setattr(config, "API_TOKEN", "token-would-be-better")
    state.credential = None
    teacher.get_students()
    assert ("password", "token-would-be-better") in _fields(session.last)
