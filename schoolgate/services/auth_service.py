from __future__ import annotations
import logging

from schoolgate import config
from schoolgate.api.client import SUCCESS

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, api_client, app_state, on_logout=None, store_credential=None):
        self.client = api_client
        self.state = app_state
        self.on_logout = on_logout
        self.store_credential = config.STORE_CREDENTIAL if store_credential is None else store_credential

    def get_current_user(self) -> dict:
        return dict(self.state.user or {})

    def is_logged_in(self) -> bool:
        return bool(self.get_current_user().get("id"))

    def has_role(self, role: str) -> bool:
        return self.get_current_user().get("role") == role

    def credential(self) -> str:
        return self.state.credential or config.API_TOKEN

    def login(self, username, password, role) -> dict:
        """POST the login action; on success the envelope's data becomes the session."""
        envelope = self.client.post("login", extra=[
            ("username", username), ("password", password), ("role", role),
        ])
        if envelope.get("status") == SUCCESS:
            self.state.set_user(envelope.get("data"), password if self.store_credential else None)
            logger.info("logged in as %s (%s)", username, role)
        return envelope

    def logout(self):
        self.state.clear()
        if callable(self.on_logout):
            self.on_logout()
