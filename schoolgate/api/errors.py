# schoolgate/api/errors.py
from __future__ import annotations


class APIError(Exception):
    """Raised when the endpoint cannot be reached or answers with a non-success status."""

    def __init__(self, message: str, *, action: str | None = None, payload=None):
        super().__init__(message)
        self.message = message
        self.action = action
        self.payload = payload


class UnauthorizedError(APIError):
    """Current session does not hold the role an operation requires."""
