"""Shared pydantic building blocks for request bodies.

Request schemas accept camelCase keys (the browser client's convention) and
normalise amounts to two-decimal ``Decimal`` values.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.constants import MAX_AMOUNT
from .money import quantize, to_decimal


def _coerce_amount(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValueError("Amount is required")
    if isinstance(value, str) and not value.strip():
        raise ValueError("Amount is required")
    amount = to_decimal(value)
    if not amount.is_finite():
        raise ValueError("Amount must be a finite number")
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    if amount > MAX_AMOUNT:
        raise ValueError(f"Amount must not exceed {MAX_AMOUNT}")
    return quantize(amount)


def _coerce_date(value: Any) -> Any:
    # Browsers send full ISO timestamps ("2023-05-12T00:00:00.000Z"); keep the day
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


Amount = Annotated[Decimal, BeforeValidator(_coerce_amount)]
Day = Annotated[date, BeforeValidator(_coerce_date)]


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )
