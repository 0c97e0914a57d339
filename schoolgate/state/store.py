from __future__ import annotations


class AppState:
    """Session record of the logged-in user, kept for the life of the process."""

    def __init__(self):
        self.user: dict = {}
        self.credential: str | None = None

    def set_user(self, user: dict | None, credential: str | None = None):
        self.user = dict(user or {})
        self.credential = credential

    def clear(self):
        self.user = {}
        self.credential = None

    @property
    def is_logged_in(self) -> bool:
        return bool(self.user.get("id"))

    @property
    def role(self) -> str | None:
        return self.user.get("role")
