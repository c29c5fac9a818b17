"""Async SQLAlchemy engine and session factory construction."""

from __future__ import annotations

from pathlib import Path
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.models import Base

_SQLITE_PREFIX = "sqlite+aiosqlite:///"


def create_engine(database_url: str) -> AsyncEngine:
    """Create the async engine; makes the parent dir for file-backed SQLite."""
    if database_url.startswith(_SQLITE_PREFIX):
        db_path = database_url[len(_SQLITE_PREFIX):]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_async_engine(database_url, echo=False, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
