from unittest.mock import MagicMock

from schoolgate import config
from schoolgate.services.auth_service import AuthService
from conftest import FakeResponse, fail


def test_no_session_means_logged_out(auth):
    assert auth.get_current_user() == {}
    assert auth.is_logged_in() is False
    assert auth.has_role("teacher") is False


def test_login_success_stores_session(auth, session, state):
    user = {"id": "T01", "username": "bu.sari", "role": "teacher"}
    session.queue(FakeResponse({"status": "success", "data": user}))

    env = auth.login("bu.sari", "rahasia", "teacher")

    assert env["status"] == "success"
    assert session.last["method"] == "POST"
    assert session.last["data"] == [
        ("action", "login"), ("username", "bu.sari"), ("password", "rahasia"), ("role", "teacher"),
    ]
    assert auth.get_current_user() == user
    assert auth.is_logged_in()
    assert auth.has_role("teacher")
    assert not auth.has_role("student")
    assert state.credential == "rahasia"


def test_login_failure_returns_envelope_and_keeps_session(auth, session, state):
    state.set_user({"id": "S01", "username": "old", "role": "student"})
    session.queue(fail("Wrong password"))

    env = auth.login("bu.sari", "nope", "teacher")

    assert env == {"status": "error", "message": "Wrong password"}
    assert auth.get_current_user()["username"] == "old"


def test_session_without_id_is_not_logged_in(auth, session):
    session.queue(FakeResponse({"status": "success", "data": {"username": "ghost", "role": "teacher"}}))
    auth.login("ghost", "x", "teacher")
    assert auth.is_logged_in() is False
    assert auth.has_role("teacher") is True


def test_get_current_user_returns_a_copy(auth, state):
    state.set_user({"id": 1, "username": "a", "role": "student"})
    auth.get_current_user()["role"] = "teacher"
    assert auth.has_role("student")


def test_credential_falls_back_to_token_when_not_stored(client, state, session, monkeypatch):
    monkeypatch.setattr(config, "API_TOKEN", "shared-token")
    auth = AuthService(client, state, store_credential=False)
    session.queue(FakeResponse({"status": "success", "data": {"id": 1, "role": "teacher"}}))
    auth.login("u", "secret", "teacher")
    assert state.credential is None
    assert auth.credential() == "shared-token"


def test_logout_clears_session_and_navigates(client, state):
    on_logout = MagicMock()
    auth = AuthService(client, state, on_logout=on_logout)
    state.set_user({"id": 3, "username": "x", "role": "teacher"}, "pw")

    auth.logout()

    assert auth.get_current_user() == {}
    assert state.credential is None
    on_logout.assert_called_once_with()


def test_logout_without_callback(auth, state):
    state.set_user({"id": 3})
    auth.logout()
    assert not auth.is_logged_in()
