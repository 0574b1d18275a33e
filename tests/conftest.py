"""
Shared fixtures. No live Postgres: repositories are monkeypatched and the
pool is replaced with an in-memory fake where a connection is needed.
"""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("JWT_SECRET", "test-secret-for-the-dashboard-suite-0123456789")

from core import cache  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_view_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def events() -> list:
    """Ordered record of side effects seen by the fakes in one test."""
    return []


@pytest.fixture
def revalidations(monkeypatch, events) -> list[str]:
    calls: list[str] = []

    def fake_revalidate(path: str) -> int:
        calls.append(path)
        events.append(("revalidate", path))
        return 0

    monkeypatch.setattr(cache, "revalidate_path", fake_revalidate)
    return calls
