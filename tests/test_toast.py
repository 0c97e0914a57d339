from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("customtkinter")

from schoolgate.api.errors import APIError
from schoolgate.theme import toast_style
from schoolgate.theme.tokens import TOKENS
from schoolgate.widgets import toast


@pytest.mark.parametrize("kind, color, icon", [
    ("success", TOKENS["color"]["success"], "✔"),
    ("error", TOKENS["color"]["danger"], "⚠"),
    ("info", TOKENS["color"]["info"], "ℹ"),
    ("warning", TOKENS["color"]["info"], "ℹ"),
    ("", TOKENS["color"]["info"], "ℹ"),
])
def test_toast_style(kind, color, icon):
    assert toast_style(kind) == (color, icon)


def test_success_and_error_colors_differ():
    assert toast_style("success")[0] == "#22C55E"
    assert toast_style("error")[0] == "#EF4444"


def test_run_or_toast_failure_shows_error():
    widget = object()
    fn = MagicMock(side_effect=APIError("Failed to fetch students"))
    with patch.object(toast, "show_toast") as show:
        result = toast.run_or_toast(widget, fn, 1, notes="x", ok_message="done")
    assert result == (False, "Failed to fetch students")
    fn.assert_called_once_with(1, notes="x")
    show.assert_called_once_with(widget, "Failed to fetch students", kind="error")


def test_run_or_toast_success_with_message():
    widget = object()
    with patch.object(toast, "show_toast") as show:
        result = toast.run_or_toast(widget, lambda: {"id": 3}, ok_message="Student added.")
    assert result == (True, {"id": 3})
    show.assert_called_once_with(widget, "Student added.", kind="success")


def test_run_or_toast_success_is_silent_without_message():
    with patch.object(toast, "show_toast") as show:
        assert toast.run_or_toast(object(), lambda: None) == (True, None)
    show.assert_not_called()


def test_run_or_toast_lets_other_errors_through():
    with patch.object(toast, "show_toast") as show:
        with pytest.raises(KeyError):
            toast.run_or_toast(object(), MagicMock(side_effect=KeyError("x")))
    show.assert_not_called()
