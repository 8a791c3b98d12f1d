"""Decimal helpers for money arithmetic."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

MoneyLike = Union[Decimal, int, float, str, None]


def to_decimal(value: MoneyLike) -> Decimal:
    """Coerce database/user values to Decimal; floats go through ``str`` to avoid binary noise."""

    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("0")


def quantize(value: MoneyLike) -> Decimal:
    """Round to cents, half away from zero (100/3 -> 33.33, 0.125 -> 0.13)."""

    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def money_sum(values: Iterable[MoneyLike]) -> Decimal:
    """Exact sum, rounded to cents once at the end."""

    total = Decimal("0")
    for value in values:
        total += to_decimal(value)
    return quantize(total)


def as_float(value: MoneyLike) -> float:
    """JSON boundary: a 2-decimal float."""

    return float(quantize(value))


def format_amount(value: MoneyLike, symbol: str = "€") -> str:
    return f"{symbol}{quantize(value):.2f}"
