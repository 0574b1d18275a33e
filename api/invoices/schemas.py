"""
Invoice form schema and money helpers.

Amounts arrive as dollar strings and are stored as integer cents.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, DecimalException
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

INVOICE_STATUSES = ("pending", "paid")

_CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> int:
    """
    Dollars -> integer cents, rounding half to even on the exact value.
    """
    return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_EVEN))


def to_dollars(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(_CENT)


def _amount_error() -> PydanticCustomError:
    return PydanticCustomError("amount_not_positive", "Please enter an amount greater than $0.")


class InvoiceForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: Literal["pending", "paid"]

    @field_validator("customer_id", mode="before")
    @classmethod
    def _check_customer(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", "Please select a customer.")
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        # Missing or blank coerces to 0, which then fails the > 0 check.
        if value is None:
            value = ""
        if isinstance(value, bool):
            raise _amount_error()
        if isinstance(value, (int, float, Decimal)):
            value = str(value)
        if not isinstance(value, str):
            raise _amount_error()

        text = value.strip()
        # Digit separators are not part of a submitted amount.
        if "_" in text:
            raise _amount_error()
        try:
            amount = Decimal(text) if text else Decimal(0)
            if not amount.is_finite() or amount <= 0 or to_cents(amount) < 1:
                raise _amount_error()
        except DecimalException as exc:
            raise _amount_error() from exc
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> str:
        if value not in INVOICE_STATUSES:
            raise PydanticCustomError("status_invalid", "Please select an invoice status.")
        return value

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)
