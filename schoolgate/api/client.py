# schoolgate/api/client.py
from __future__ import annotations
import logging
import requests

from schoolgate import config
from schoolgate.api.errors import APIError

logger = logging.getLogger(__name__)

SUCCESS = "success"


def _form_value(v) -> str:
    if v is None: return ""
    if isinstance(v, bool): return "true" if v else "false"
    return str(v)


def build_fields(action: str, credentials=None, extra=None) -> list[tuple[str, str]]:
    """Ordered form/query fields: action, credential triple, then extras.

    ``extra`` may be a mapping or a list of pairs; keys repeat instead of
    overwriting, the same way repeated ``append`` calls behave on a form.
    """
    fields = [("action", action)]
    for part in (credentials, extra):
        if not part:
            continue
        items = part.items() if isinstance(part, dict) else part
        fields.extend((str(k), _form_value(v)) for k, v in items)
    return fields


class APIClient:
    def __init__(self, base_url=None, timeout=None, session: requests.Session | None = None):
        self.base_url = base_url or config.API_BASE_URL
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def get(self, action, credentials=None, extra=None) -> dict:
        fields = build_fields(action, credentials, extra)
        logger.debug("GET action=%s", action)
        return self._send(action, "GET", params=fields)

    def post(self, action, credentials=None, extra=None) -> dict:
        fields = build_fields(action, credentials, extra)
        logger.debug("POST action=%s", action)
        return self._send(action, "POST", data=fields)

    def _send(self, action, method, **kw) -> dict:
        try:
            r = self.session.request(method, self.base_url, timeout=self.timeout, **kw)
        except requests.RequestException as e:
            logger.warning("[%s] request failed: %s", action, e)
            raise APIError(f"Connection error: {e}", action=action) from e
        try:
            data = r.json()
        except ValueError as e:
            logger.warning("[%s] HTTP %s, non-JSON body: %.200s", action, r.status_code, r.text)
            raise APIError(f"Invalid response from server (HTTP {r.status_code})", action=action) from e
        if not isinstance(data, dict):
            raise APIError("Invalid response from server", action=action, payload=data)
        return data

    @staticmethod
    def unwrap(envelope: dict, default_message: str, action: str | None = None):
        """Return ``envelope["data"]`` or raise with the server message."""
        if envelope.get("status") != SUCCESS:
            message = envelope.get("message") or default_message
            logger.warning("[%s] %s", action or "?", message)
            raise APIError(message, action=action, payload=envelope)
        return envelope.get("data")
