"""
Database connectivity smoke test.
"""

from __future__ import annotations

import logging

from core import db

from . import repository

logger = logging.getLogger(__name__)


async def verify_data() -> int:
    """
    Read the whole revenue table in one transaction and log every row.

    The connection is borrowed for this call only. Any error rolls the
    transaction back and propagates. Returns the number of rows read.
    """
    async with db.connection() as conn:
        async with conn.transaction():
            rows = await repository.fetch_revenue(conn)
            for row in rows:
                logger.info("revenue_row %s", row)
    return len(rows)
