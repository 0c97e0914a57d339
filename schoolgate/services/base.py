from __future__ import annotations

from schoolgate.api.errors import UnauthorizedError


class RoleGatedService:
    """Checks the session role, then sends one backend action with the credential triple.

    The check is client-side only; the endpoint decides what the credentials
    actually allow.
    """
    role: str = ""

    def __init__(self, api_client, auth):
        self.client = api_client
        self.auth = auth

    def _user(self) -> dict:
        if not self.auth.has_role(self.role):
            raise UnauthorizedError("Unauthorized access")
        return self.auth.get_current_user()

    def _credentials(self, user: dict):
        return [("username", user.get("username")), ("password", self.auth.credential()), ("role", self.role)]

    def _call(self, action, default_message, *parts, method="GET"):
        """``parts`` are mappings or pair lists, sent in order after the role scope."""
        user = self._user()
        fields = list(self._scope(user))
        for part in parts:
            if part:
                fields.extend(part.items() if isinstance(part, dict) else part)
        send = self.client.post if method == "POST" else self.client.get
        envelope = send(action, credentials=self._credentials(user), extra=fields)
        return self.client.unwrap(envelope, default_message, action)

    def _scope(self, user: dict):
        """Fields every request of this role carries after the credentials."""
        return []

    def _user_id(self):
        return self.auth.get_current_user().get("id")
