"""
Debug-only endpoint. Error responses echo raw database detail.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from . import service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/verify-data")
async def verify_data() -> JSONResponse:
    try:
        row_count = await service.verify_data()
    except Exception as exc:
        logger.exception("verify_data_failed")
        return JSONResponse(
            {"error": {"type": type(exc).__name__, "detail": str(exc)}},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    logger.info("verify_data_succeeded rows=%s", row_count)
    return JSONResponse({"message": "success"})
