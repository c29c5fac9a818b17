"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.complaint import Complaint
from app.models.admin import Admin

__all__ = ["Base", "Complaint", "Admin"]
