"""Pydantic request/response schemas."""

from app.schemas.complaint import ComplaintCreate, ComplaintRead, SubmissionResult
from app.schemas.admin import AdminLogin, LoginResult

__all__ = [
    "ComplaintCreate", "ComplaintRead", "SubmissionResult",
    "AdminLogin", "LoginResult",
]
