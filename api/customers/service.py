"""
Customer form actions and read views.

Each action runs: validate -> one SQL statement -> revalidate the customer
listing -> redirect (create/update only). Updates and deletes also revalidate
the invoice listing, which shows customer names.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import HTTPException, status

from core import cache, db, forms
from core.actions import ActionResult, ActionState, Redirect
from core.paths import CUSTOMERS_PATH, INVOICES_PATH

from . import repository, schemas

logger = logging.getLogger(__name__)


async def create_customer(form: Mapping[str, Any]) -> ActionResult:
    parsed = forms.safe_parse(schemas.CustomerForm, form)
    if not parsed.success:
        return ActionState(errors=parsed.errors)

    customer = parsed.value
    try:
        row = await repository.insert_customer(
            name=customer.name,
            email=customer.email,
            url=customer.url,
        )
    except db.DatabaseError:
        logger.exception("customer_create_failed")
        return ActionState(message="Database Error: Failed to Create Customer.")

    logger.info("customer_created id=%s", row.get("id"))
    cache.revalidate_path(CUSTOMERS_PATH)
    return Redirect(CUSTOMERS_PATH)


async def update_customer(customer_id: str, form: Mapping[str, Any]) -> ActionResult:
    parsed = forms.safe_parse(schemas.CustomerForm, form)
    if not parsed.success:
        return ActionState(
            errors=parsed.errors,
            message="Missing Fields. Failed to Update Customer.",
        )

    customer = parsed.value
    try:
        await repository.update_customer(
            customer_id,
            name=customer.name,
            email=customer.email,
            url=customer.url,
        )
    except db.DatabaseError:
        logger.exception("customer_update_failed id=%s", customer_id)
        return ActionState(message=f"Database Error: Failed to Update Customer {customer.name}.")

    logger.info("customer_updated id=%s", customer_id)
    cache.revalidate_path(CUSTOMERS_PATH)
    cache.revalidate_path(INVOICES_PATH)
    return Redirect(CUSTOMERS_PATH)


async def delete_customer(customer_id: str) -> ActionResult:
    try:
        await repository.delete_customer(customer_id)
    except db.DatabaseError:
        logger.exception("customer_delete_failed id=%s", customer_id)
        return ActionState(message="Database Error: Failed to Delete Customer.")

    logger.info("customer_deleted id=%s", customer_id)
    cache.revalidate_path(CUSTOMERS_PATH)
    cache.revalidate_path(INVOICES_PATH)
    return None


async def list_customers() -> dict:
    async def load() -> dict:
        rows = await repository.list_customers()
        return {"customers": rows, "count": len(rows)}

    return await cache.get_or_load(CUSTOMERS_PATH, load)


async def get_customer(customer_id: str) -> dict:
    path = f"{CUSTOMERS_PATH}/{customer_id}"
    cached = cache.get(path)
    if cached is not None:
        return cached

    row = await repository.get_customer(customer_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found.")
    cache.put(path, row)
    return row
