"""
Customer dashboard endpoints.

Mutations take form-encoded bodies, the same fields the dashboard form posts.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from auth import dependencies as auth_dependencies
from core import actions

from . import service

router = APIRouter(
    prefix="/dashboard/customers",
    dependencies=[Depends(auth_dependencies.get_current_user)],
)


@router.get("")
async def list_customers() -> dict:
    return await service.list_customers()


@router.get("/{customer_id}")
async def get_customer(customer_id: UUID) -> dict:
    return await service.get_customer(str(customer_id))


@router.post("")
async def create_customer(request: Request) -> Response:
    form = await request.form()
    result = await service.create_customer(form)
    return actions.to_response(result)


@router.put("/{customer_id}")
async def update_customer(customer_id: UUID, request: Request) -> Response:
    form = await request.form()
    result = await service.update_customer(str(customer_id), form)
    return actions.to_response(result)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: UUID) -> Response:
    result = await service.delete_customer(str(customer_id))
    return actions.to_response(result)
