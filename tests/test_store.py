from schoolgate.state.store import AppState


def test_fresh_state_is_logged_out():
    st = AppState()
    assert st.user == {}
    assert st.credential is None
    assert not st.is_logged_in
    assert st.role is None


def test_set_user_copies_record():
    record = {"id": 7, "username": "andi", "role": "student"}
    st = AppState()
    st.set_user(record, "pw")
    record["role"] = "teacher"
    assert st.role == "student"
    assert st.is_logged_in
    assert st.credential == "pw"


def test_set_user_none_and_clear():
    st = AppState()
    st.set_user(None)
    assert st.user == {}
    st.set_user({"id": 1}, "x")
    st.clear()
    assert st.user == {} and st.credential is None
