"""
Invoice persistence (raw SQL).

`amount` is stored in cents.
"""

from __future__ import annotations

from datetime import date

from core import db


async def insert_invoice(
    *,
    customer_id: str,
    amount: int,
    status: str,
    invoice_date: date,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO invoices (customer_id, amount, status, date)
        VALUES ($1, $2, $3, $4)
        RETURNING id
        """,
        customer_id,
        amount,
        status,
        invoice_date,
    )
    if row is None:
        raise db.DatabaseError("Failed to insert invoice.")
    return row


async def update_invoice(
    invoice_id: str,
    *,
    customer_id: str,
    amount: int,
    status: str,
) -> None:
    await db.execute(
        """
        UPDATE invoices
        SET customer_id = $2, amount = $3, status = $4
        WHERE id = $1
        """,
        invoice_id,
        customer_id,
        amount,
        status,
    )


async def delete_invoice(invoice_id: str) -> None:
    await db.execute("DELETE FROM invoices WHERE id = $1", invoice_id)


async def list_invoices() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT
          invoices.id,
          invoices.customer_id,
          invoices.amount,
          invoices.status,
          invoices.date,
          customers.name,
          customers.email
        FROM invoices
        JOIN customers ON invoices.customer_id = customers.id
        ORDER BY invoices.date DESC
        """
    )


async def get_invoice(invoice_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, customer_id, amount, status, date
        FROM invoices
        WHERE id = $1
        """,
        invoice_id,
    )
