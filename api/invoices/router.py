"""
Invoice dashboard endpoints.

Mutation bodies are form-encoded: customerId, amount (dollars), status.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from auth import dependencies as auth_dependencies
from core import actions

from . import service

router = APIRouter(
    prefix="/dashboard/invoices",
    dependencies=[Depends(auth_dependencies.get_current_user)],
)


@router.get("")
async def list_invoices() -> dict:
    return await service.list_invoices()


@router.get("/{invoice_id}")
async def get_invoice(invoice_id: UUID) -> dict:
    return await service.get_invoice(str(invoice_id))


@router.post("")
async def create_invoice(request: Request) -> Response:
    form = await request.form()
    result = await service.create_invoice(form)
    return actions.to_response(result)


@router.put("/{invoice_id}")
async def update_invoice(invoice_id: UUID, request: Request) -> Response:
    form = await request.form()
    result = await service.update_invoice(str(invoice_id), form)
    return actions.to_response(result)


@router.delete("/{invoice_id}")
async def delete_invoice(invoice_id: UUID) -> Response:
    result = await service.delete_invoice(str(invoice_id))
    return actions.to_response(result)
