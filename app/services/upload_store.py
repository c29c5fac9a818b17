"""Attachment storage: unique naming, writes, cleanup.

Files live flat in one directory and are addressed publicly as
/uploads/<name>.
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
import re
import secrets
import time
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads"
_WHITESPACE = re.compile(r"\s+")


@dataclass
class StoredFile:
    name: str
    path: Path

    @property
    def url(self) -> str:
        return f"{URL_PREFIX}/{self.name}"


def normalize_filename(original: str | None, content_type: str | None = None) -> str:
    """Basename of the client's filename with whitespace runs collapsed to '_'."""
    name = PureWindowsPath(original or "").name.strip()
    name = _WHITESPACE.sub("_", name)
    if name in ("", ".", ".."):
        ext = mimetypes.guess_extension(content_type or "") or ""
        name = f"upload{ext}"
    return name


def generate_name(original: str | None, content_type: str | None = None) -> str:
    """<epoch-millis>-<random hex>-<normalized original name>."""
    millis = int(time.time() * 1000)
    return f"{millis}-{secrets.token_hex(4)}-{normalize_filename(original, content_type)}"


class UploadStore:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def ensure_dir(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _save_sync(self, data: bytes, original: str | None, content_type: str | None) -> StoredFile:
        self.ensure_dir()
        name = generate_name(original, content_type)
        path = self.directory / name
        # "x" refuses to overwrite on the off chance two names collide
        with open(path, "xb") as f:
            f.write(data)
        return StoredFile(name=name, path=path)

    async def save(self, data: bytes, original: str | None, content_type: str | None = None) -> StoredFile:
        return await asyncio.to_thread(self._save_sync, data, original, content_type)

    def _remove_sync(self, stored: list[StoredFile]) -> int:
        removed = 0
        for f in stored:
            try:
                f.path.unlink()
                removed += 1
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning("Could not remove orphan upload %s: %s", f.path, e)
        return removed

    async def remove(self, stored: list[StoredFile]) -> int:
        """Delete previously stored files; returns how many were removed."""
        return await asyncio.to_thread(self._remove_sync, stored)
