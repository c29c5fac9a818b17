from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

REQUIRED_FIELDS = ("fullname", "phone", "complaint_type", "description", "urgency")


def _to_coordinate(value: Any) -> float | None:
    """Parse an optional coordinate; blank or non-numeric input becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class ComplaintCreate(BaseModel):
    fullname: str
    phone: str
    complaint_type: str
    description: str
    urgency: str
    latitude: float | None = None
    longitude: float | None = None

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def _strip_required(cls, v: Any) -> str:
        if v is None:
            raise ValueError("field required")
        text = str(v).strip()
        if not text:
            raise ValueError("field must not be empty")
        return text

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _parse_coordinate(cls, v: Any) -> float | None:
        return _to_coordinate(v)


class ComplaintRead(BaseModel):
    id: int
    fullname: str = ""
    phone: str = ""
    complaint_type: str = ""
    description: str = ""
    urgency: str = ""
    latitude: float | None = None
    longitude: float | None = None
    timestamp: datetime | None = None
    file_urls: list[str] = []

    @field_validator("fullname", "phone", "complaint_type", "description", "urgency", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)


class SubmissionResult(BaseModel):
    success: bool = True
    message: str = "Complaint submitted successfully"
    id: int
