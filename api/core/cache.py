"""
Path-keyed cache for rendered read views.

Listing endpoints store their payload under their logical path (e.g.
`/dashboard/invoices`). Mutations call `revalidate_path()` for the listing
they affect, which drops that entry and every entry below it, so the next
read recomputes from the database.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from . import settings

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    value: Any
    stored_at: float


_entries: dict[str, _Entry] = {}


def normalize_path(path: str) -> str:
    path = "/" + (path or "").strip().strip("/")
    return path


def _is_fresh(entry: _Entry) -> bool:
    ttl = settings.view_cache_ttl_s()
    if ttl == 0:
        return True
    return (time.monotonic() - entry.stored_at) < ttl


def get(path: str) -> Any | None:
    key = normalize_path(path)
    entry = _entries.get(key)
    if entry is None:
        return None
    if not _is_fresh(entry):
        del _entries[key]
        return None
    return entry.value


def put(path: str, value: Any) -> None:
    _entries[normalize_path(path)] = _Entry(value=value, stored_at=time.monotonic())


async def get_or_load(path: str, loader: Callable[[], Awaitable[Any]]) -> Any:
    """
    Return the cached view for `path`, loading and storing it on a miss.
    """
    cached = get(path)
    if cached is not None:
        return cached
    value = await loader()
    put(path, value)
    return value


def revalidate_path(path: str) -> int:
    """
    Mark the view at `path` and everything under it stale.

    Returns how many cached entries were dropped.
    """
    root = normalize_path(path)
    prefix = root.rstrip("/") + "/"
    stale = [key for key in _entries if key == root or key.startswith(prefix)]
    for key in stale:
        del _entries[key]
    logger.debug("cache_revalidated path=%s dropped=%s", root, len(stale))
    return len(stale)


def clear() -> None:
    _entries.clear()
