"""
Diagnostic reads. Callers pass in the connection so the read runs inside
their transaction.
"""

from __future__ import annotations

import asyncpg


async def fetch_revenue(conn: asyncpg.Connection) -> list[dict]:
    rows = await conn.fetch("SELECT * FROM revenue")
    return [dict(row) for row in rows]
