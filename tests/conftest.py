import pytest

from schoolgate.api.client import APIClient
from schoolgate.state.store import AppState
from schoolgate.services.auth_service import AuthService
from schoolgate.services.teacher_service import TeacherService
from schoolgate.services.student_service import StudentService

BASE_URL = "https://script.example.test/exec"


class FakeResponse:
    def __init__(self, body=None, status_code=200, text=None):
        self._body = body
        self.status_code = status_code
        self.text = text if text is not None else ""

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    """Records every request and answers with queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def request(self, method, url, **kw):
        self.calls.append({"method": method, "url": url, **kw})
        if not self.responses:
            return FakeResponse({"status": "success", "data": None})
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r

    @property
    def last(self):
        return self.calls[-1]


def ok(data=None):
    return FakeResponse({"status": "success", "data": data})


def fail(message=None):
    body = {"status": "error"}
    if message is not None:
        body["message"] = message
    return FakeResponse(body)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return APIClient(base_url=BASE_URL, timeout=5, session=session)


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def auth(client, state):
    return AuthService(client, state, store_credential=True)


@pytest.fixture
def teacher(client, auth, state):
    state.set_user({"id": "T01", "username": "bu.sari", "role": "teacher"}, "rahasia")
    return TeacherService(client, auth)


@pytest.fixture
def student(client, auth, state):
    state.set_user({"id": "S07", "username": "andi", "role": "student"}, "andi123")
    return StudentService(client, auth)
