"""
Customer persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def insert_customer(*, name: str, email: str | None, url: str | None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO customers (name, email, url)
        VALUES ($1, $2, $3)
        RETURNING id
        """,
        name,
        email,
        url,
    )
    if row is None:
        raise db.DatabaseError("Failed to insert customer.")
    return row


async def update_customer(
    customer_id: str,
    *,
    name: str,
    email: str | None,
    url: str | None,
) -> None:
    await db.execute(
        """
        UPDATE customers
        SET name = $2, email = $3, url = $4
        WHERE id = $1
        """,
        customer_id,
        name,
        email,
        url,
    )


async def delete_customer(customer_id: str) -> None:
    await db.execute("DELETE FROM customers WHERE id = $1", customer_id)


async def list_customers() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT
          customers.id,
          customers.name,
          customers.email,
          customers.url,
          COUNT(invoices.id) AS total_invoices,
          COALESCE(SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END), 0) AS total_pending,
          COALESCE(SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END), 0) AS total_paid
        FROM customers
        LEFT JOIN invoices ON customers.id = invoices.customer_id
        GROUP BY customers.id, customers.name, customers.email, customers.url
        ORDER BY customers.name ASC
        """
    )


async def get_customer(customer_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, email, url
        FROM customers
        WHERE id = $1
        """,
        customer_id,
    )
