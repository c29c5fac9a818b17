"""Complaint submission and admin listing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import crud
from app.errors import InternalError, ValidationError
from app.schemas import ComplaintCreate, ComplaintRead
from app.services import file_urls
from app.services.upload_store import StoredFile, UploadStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"


@dataclass
class IncomingFile:
    filename: str | None
    content_type: str | None
    data: bytes


def validate_submission(form: Mapping[str, Any], file_count: int, max_files: int) -> ComplaintCreate:
    """Validate before any side effect. Raises ValidationError."""
    try:
        payload = ComplaintCreate.model_validate(dict(form))
    except PydanticValidationError as e:
        raise ValidationError(MISSING_FIELDS_MESSAGE) from e
    if file_count > max_files:
        raise ValidationError(f"Too many files (max {max_files})")
    return payload


async def submit_complaint(
    db: AsyncSession,
    store: UploadStore,
    payload: ComplaintCreate,
    files: list[IncomingFile],
    cleanup_on_failure: bool = True,
) -> int:
    """Write attachments, then insert the record. Returns the new id."""
    stored: list[StoredFile] = []
    try:
        for f in files:
            stored.append(await store.save(f.data, f.filename, f.content_type))

        complaint = await crud.create_complaint(
            db,
            fullname=payload.fullname,
            phone=payload.phone,
            complaint_type=payload.complaint_type,
            description=payload.description,
            urgency=payload.urgency,
            latitude=payload.latitude,
            longitude=payload.longitude,
            file_urls=[s.url for s in stored],
        )
    except (SQLAlchemyError, OSError) as e:
        if stored and cleanup_on_failure:
            removed = await store.remove(stored)
            logger.info("Removed %d orphan upload(s) after failed submission", removed)
        elif stored:
            logger.warning("Leaving %d orphan upload(s) after failed submission", len(stored))
        try:
            await db.rollback()
        except (SQLAlchemyError, OSError) as rollback_error:
            logger.warning("Rollback after failed submission also failed: %s", rollback_error)
        raise InternalError("Failed to submit complaint", error=str(e)) from e

    logger.info("Stored complaint id=%s with %d attachment(s)", complaint.id, len(stored))
    return complaint.id


async def list_complaints(db: AsyncSession, base_url: str) -> list[ComplaintRead]:
    """All complaints newest first, attachment paths projected to absolute URLs."""
    try:
        rows = await crud.list_complaints(db)
    except (SQLAlchemyError, OSError) as e:
        raise InternalError("Failed to fetch complaints", error=str(e)) from e

    return [
        ComplaintRead(
            id=row.id,
            fullname=row.fullname,
            phone=row.phone,
            complaint_type=row.complaint_type,
            description=row.description,
            urgency=row.urgency,
            latitude=row.latitude,
            longitude=row.longitude,
            timestamp=row.timestamp,
            file_urls=file_urls.project(base_url, row.file_urls),
        )
        for row in rows
    ]
