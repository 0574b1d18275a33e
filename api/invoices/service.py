"""
Invoice form actions and read views.

Each action runs: validate -> one SQL statement -> revalidate the invoice
listing and the customer listing (it carries invoice totals) -> redirect
(create/update only). The invoice date is always set here, never read
from the form.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from fastapi import HTTPException, status

from core import cache, db, forms
from core.actions import ActionResult, ActionState, Redirect
from core.paths import CUSTOMERS_PATH, INVOICES_PATH

from . import repository, schemas

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(timezone.utc).date()


async def create_invoice(form: Mapping[str, Any]) -> ActionResult:
    parsed = forms.safe_parse(schemas.InvoiceForm, form)
    if not parsed.success:
        return ActionState(
            errors=parsed.errors,
            message="Missing Fields. Failed to Create Invoice.",
        )

    invoice = parsed.value
    try:
        row = await repository.insert_invoice(
            customer_id=invoice.customer_id,
            amount=invoice.amount_in_cents,
            status=invoice.status,
            invoice_date=_today(),
        )
    except db.DatabaseError:
        logger.exception("invoice_create_failed customer_id=%s", invoice.customer_id)
        return ActionState(message="Database Error: Failed to Create Invoice.")

    logger.info(
        "invoice_created id=%s customer_id=%s amount=%s",
        row.get("id"),
        invoice.customer_id,
        invoice.amount_in_cents,
    )
    cache.revalidate_path(INVOICES_PATH)
    cache.revalidate_path(CUSTOMERS_PATH)
    return Redirect(INVOICES_PATH)


async def update_invoice(invoice_id: str, form: Mapping[str, Any]) -> ActionResult:
    parsed = forms.safe_parse(schemas.InvoiceForm, form)
    if not parsed.success:
        return ActionState(
            errors=parsed.errors,
            message="Missing Fields. Failed to Update Invoice.",
        )

    invoice = parsed.value
    try:
        await repository.update_invoice(
            invoice_id,
            customer_id=invoice.customer_id,
            amount=invoice.amount_in_cents,
            status=invoice.status,
        )
    except db.DatabaseError:
        logger.exception("invoice_update_failed id=%s", invoice_id)
        return ActionState(message=f"Database Error: Failed to Update Invoice {invoice_id}.")

    logger.info("invoice_updated id=%s", invoice_id)
    cache.revalidate_path(INVOICES_PATH)
    cache.revalidate_path(CUSTOMERS_PATH)
    return Redirect(INVOICES_PATH)


async def delete_invoice(invoice_id: str) -> ActionResult:
    try:
        await repository.delete_invoice(invoice_id)
    except db.DatabaseError:
        logger.exception("invoice_delete_failed id=%s", invoice_id)
        return ActionState(message="Database Error: Failed to Delete Invoice.")

    logger.info("invoice_deleted id=%s", invoice_id)
    cache.revalidate_path(INVOICES_PATH)
    cache.revalidate_path(CUSTOMERS_PATH)
    return None


async def list_invoices() -> dict:
    async def load() -> dict:
        rows = await repository.list_invoices()
        return {"invoices": rows, "count": len(rows)}

    return await cache.get_or_load(INVOICES_PATH, load)


async def get_invoice(invoice_id: str) -> dict:
    """
    One invoice shaped for the edit form (amount back in dollars).
    """
    path = f"{INVOICES_PATH}/{invoice_id}"
    cached = cache.get(path)
    if cached is not None:
        return cached

    row = await repository.get_invoice(invoice_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found.")

    invoice = {
        "id": row["id"],
        "customer_id": row["customer_id"],
        "amount": schemas.to_dollars(int(row["amount"])),
        "status": str(row["status"]),
        "date": row["date"],
    }
    cache.put(path, invoice)
    return invoice
