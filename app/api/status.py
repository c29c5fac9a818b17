"""Health probe."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import crud
from app.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status")
async def status(db: AsyncSession = Depends(get_db)):
    try:
        now = await crud.database_time(db)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Status probe failed: %s", e)
        return JSONResponse(status_code=500, content={
            "success": False,
            "message": "Database not reachable",
            "error": str(e),
        })
    return {
        "success": True,
        "message": "Backend and database are running",
        "time": now.isoformat() if hasattr(now, "isoformat") else str(now),
    }
