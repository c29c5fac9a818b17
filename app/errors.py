"""Error taxonomy shared by services and the HTTP layer."""

from __future__ import annotations


class ComplaintDeskError(Exception):
    """Base error carrying the HTTP status and user-facing message."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ComplaintDeskError):
    """Missing or malformed submission input; raised before any write."""

    status_code = 400


class AuthError(ComplaintDeskError):
    """Missing/invalid credentials. Login failures are reported as 400."""

    status_code = 401


class InternalError(ComplaintDeskError):
    """Datastore or storage failure; `error` holds the underlying message."""

    status_code = 500
