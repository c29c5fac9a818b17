"""Admin login API."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.dependencies import get_db, get_settings_dep
from app.schemas import AdminLogin, LoginResult
from app.services.auth import authenticate, create_access_token

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login", response_model=LoginResult)
async def login(
    body: AdminLogin,
    settings: Settings = Depends(get_settings_dep),
    db: AsyncSession = Depends(get_db),
):
    identity = await authenticate(db, body.username.strip(), body.password)
    token = create_access_token(identity, settings.jwt_secret, settings.token_ttl_minutes)
    return LoginResult(token=token)
