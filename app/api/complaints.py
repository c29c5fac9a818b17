"""Complaint API: public submission + admin listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import AppContext
from app.dependencies import get_context, get_db, listing_guard, require_admin
from app.schemas import ComplaintRead, SubmissionResult
from app.services import complaints as complaint_service
from app.services.complaints import IncomingFile

router = APIRouter(tags=["complaints"])


@router.post("/api/complaints", response_model=SubmissionResult)
async def submit_complaint(
    fullname: str | None = Form(None),
    phone: str | None = Form(None),
    complaint_type: str | None = Form(None),
    description: str | None = Form(None),
    urgency: str | None = Form(None),
    latitude: str | None = Form(None),
    longitude: str | None = Form(None),
    files: list[UploadFile] | None = File(None),
    ctx: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db),
):
    files = files or []
    upload_cfg = ctx.settings.uploads
    payload = complaint_service.validate_submission(
        {
            "fullname": fullname,
            "phone": phone,
            "complaint_type": complaint_type,
            "description": description,
            "urgency": urgency,
            "latitude": latitude,
            "longitude": longitude,
        },
        file_count=len(files),
        max_files=upload_cfg.max_files,
    )

    incoming = [
        IncomingFile(filename=f.filename, content_type=f.content_type, data=await f.read())
        for f in files
    ]
    complaint_id = await complaint_service.submit_complaint(
        db, ctx.uploads, payload, incoming,
        cleanup_on_failure=upload_cfg.cleanup_on_failure,
    )
    return SubmissionResult(id=complaint_id)


@router.get("/api/complaints", response_model=list[ComplaintRead], dependencies=[Depends(listing_guard)])
async def list_complaints(
    ctx: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db),
):
    return await complaint_service.list_complaints(db, ctx.settings.base_url)


@router.get("/api/admin/complaints", response_model=list[ComplaintRead], dependencies=[Depends(require_admin)])
async def list_complaints_admin(
    ctx: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db),
):
    return await complaint_service.list_complaints(db, ctx.settings.base_url)
