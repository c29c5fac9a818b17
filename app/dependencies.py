"""FastAPI dependency providers for the service context, DB sessions and the admin gate."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.context import AppContext
from app.services.auth import AdminIdentity, decode_access_token, extract_bearer


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_settings_dep(ctx: AppContext = Depends(get_context)) -> Settings:
    return ctx.settings


async def get_db(ctx: AppContext = Depends(get_context)) -> AsyncSession:
    """Yield an async session bound to the context's engine."""
    async with ctx.session_factory() as session:
        yield session


async def require_admin(
    request: Request,
    settings: Settings = Depends(get_settings_dep),
) -> AdminIdentity:
    """Verify the bearer token; stores the identity on request.state.admin."""
    token = extract_bearer(request.headers.get("Authorization"))
    identity = decode_access_token(token, settings.jwt_secret)
    request.state.admin = identity
    return identity


async def listing_guard(
    request: Request,
    settings: Settings = Depends(get_settings_dep),
) -> AdminIdentity | None:
    """Gate GET /api/complaints only when listing_requires_auth is set."""
    if not settings.listing_requires_auth:
        return None
    return await require_admin(request, settings)
