"""Decimal helpers for currency values.

Amounts travel as strings on the wire ("1250.00"), as ``Decimal`` inside the
services and as NUMERIC(12, 2) in the database.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

AmountLike = Union[Decimal, str, int, float]


def to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through str so 0.1 stays 0.1
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e


def quantize(value: AmountLike) -> Decimal:
    try:
        return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Amount out of range: {value!r}") from e


def sum_amounts(values: Iterable[AmountLike]) -> Decimal:
    total = ZERO
    for v in values:
        total += to_decimal(v)
    return quantize(total)


def format_amount(value: AmountLike) -> str:
    return f"{quantize(value):.2f}"
