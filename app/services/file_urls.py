"""Parsing and absolute-URL projection of stored attachment paths.

`file_urls` has been persisted in more than one shape over time: a JSON
text column (current), a native array (JSON/ARRAY column drivers), and
occasionally null or junk. `parse_stored` classifies the raw value into one
of those shapes and always yields a list of strings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Literal

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class StoredFileUrls:
    kind: Literal["array", "json_text", "empty", "invalid"]
    paths: tuple[str, ...] = ()


def _only_strings(items: list[Any]) -> tuple[str, ...]:
    return tuple(item for item in items if isinstance(item, str) and item)


def classify(raw: Any) -> StoredFileUrls:
    if raw is None:
        return StoredFileUrls("empty")
    if isinstance(raw, (list, tuple)):
        return StoredFileUrls("array", _only_strings(list(raw)))
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        if not raw.strip():
            return StoredFileUrls("empty")
        try:
            decoded = json.loads(raw)
        except ValueError:
            return StoredFileUrls("invalid")
        if isinstance(decoded, list):
            return StoredFileUrls("json_text", _only_strings(decoded))
        return StoredFileUrls("invalid")
    return StoredFileUrls("invalid")


def parse_stored(raw: Any) -> list[str]:
    """Return stored paths as a list; unparseable values become []."""
    parsed = classify(raw)
    if parsed.kind == "invalid":
        logger.warning("Ignoring unparseable file_urls value: %r", raw)
    return list(parsed.paths)


def to_absolute(base_url: str, path: str) -> str:
    if path.startswith(_ABSOLUTE_PREFIXES):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return base_url.rstrip("/") + path


def project(base_url: str, raw: Any) -> list[str]:
    """Read-time projection: stored relative paths -> absolute URLs."""
    return [to_absolute(base_url, p) for p in parse_stored(raw)]
