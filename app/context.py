"""Per-process service context: settings, DB engine, upload store."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import Settings
from app.db.engine import create_engine, create_session_factory
from app.services.upload_store import UploadStore


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    uploads: UploadStore

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_context(settings: Settings) -> AppContext:
    engine = create_engine(settings.database_url)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        uploads=UploadStore(settings.uploads.directory),
    )
