"""CRUD operations for complaints and admin credentials."""

from __future__ import annotations

import json

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Admin, Complaint


# ── Complaint ─────────────────────────────────────────────

async def create_complaint(
    db: AsyncSession,
    fullname: str,
    phone: str,
    complaint_type: str,
    description: str,
    urgency: str,
    latitude: float | None = None,
    longitude: float | None = None,
    file_urls: list[str] | None = None,
) -> Complaint:
    complaint = Complaint(
        fullname=fullname,
        phone=phone,
        complaint_type=complaint_type,
        description=description,
        urgency=urgency,
        latitude=latitude,
        longitude=longitude,
        file_urls=json.dumps(file_urls or []),
    )
    db.add(complaint)
    await db.commit()
    await db.refresh(complaint)
    return complaint


async def list_complaints(db: AsyncSession) -> list[Complaint]:
    """All complaints, newest first."""
    result = await db.execute(select(Complaint).order_by(Complaint.id.desc()))
    return list(result.scalars().all())


async def get_complaint(db: AsyncSession, complaint_id: int) -> Complaint | None:
    return await db.get(Complaint, complaint_id)


# ── Admin ─────────────────────────────────────────────────

async def get_admin_by_username(db: AsyncSession, username: str) -> Admin | None:
    result = await db.execute(select(Admin).where(Admin.username == username))
    return result.scalars().first()


async def create_admin(db: AsyncSession, username: str, password_hash: str) -> Admin:
    admin = Admin(username=username, password_hash=password_hash)
    db.add(admin)
    await db.commit()
    await db.refresh(admin)
    return admin


# ── Health ────────────────────────────────────────────────

async def database_time(db: AsyncSession):
    result = await db.execute(select(func.current_timestamp()))
    return result.scalar()
