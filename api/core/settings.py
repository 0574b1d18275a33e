"""
Environment-backed settings.

Every value has a local default so the API starts in development without
extra configuration.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def view_cache_ttl_s() -> int:
    # 0 keeps cached views until a mutation revalidates them.
    return max(0, env_int("VIEW_CACHE_TTL_S", 0))


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
