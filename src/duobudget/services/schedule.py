"""Monthly-amount resolution for expenses.

An ``Expense`` row carries every scheduling column at once; only some of them
are meaningful for a given category/frequency/strategy. ``schedule_for`` turns
the row into exactly one schedule variant, and each variant knows how much of
the nominal amount falls into a given (month, year):

* ``MonthlyRecurring``      every month, full amount
* ``YearlyFull``            full amount in the payment month only
* ``YearlyInstallments``    equal slices every ``step`` months from the anchor
* ``YearlySpread``          legacy yearly rows without a strategy: amount / 12
* ``OneTime``               full amount in its own month
* ``OneTimeInstallments``   ``count`` slices every ``step`` months from the start

Resolved amounts are Decimal rounded to cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from ..models.enums import (
    ExpenseCategory,
    ExpenseFrequency,
    InstallmentFrequency,
    YearlyPaymentStrategy,
)
from ..models.expense import Expense
from .money import ZERO, quantize, to_decimal

_STEP_MONTHS = {
    InstallmentFrequency.MONTHLY: 1,
    InstallmentFrequency.QUARTERLY: 3,
    InstallmentFrequency.SEMI_ANNUAL: 6,
}


def _coerce(enum_cls, value: Any):
    """Return the enum member for ``value`` or None when it is unknown."""

    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def step_months(frequency: InstallmentFrequency | str | None) -> int:
    """Months between two installments; unknown frequencies behave as monthly."""

    return _STEP_MONTHS.get(_coerce(InstallmentFrequency, frequency), 1)


def installments_per_year(frequency: InstallmentFrequency | str | None) -> int:
    return 12 // step_months(frequency)


def is_installment_month(month: int, anchor_month: int, step: int) -> bool:
    """True when ``month`` lies a whole number of steps away from ``anchor_month``.

    Works modulo 12, so anchor=11, step=6 yields November and May.
    """

    if step <= 0:
        return False
    return (month - anchor_month) % step == 0


def _month_index(month: int, year: int) -> int:
    return year * 12 + (month - 1)


@dataclass(frozen=True, slots=True)
class MonthlyRecurring:
    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        return quantize(amount)


@dataclass(frozen=True, slots=True)
class YearlyFull:
    payment_month: Optional[int]

    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        if self.payment_month is not None and month == self.payment_month:
            return quantize(amount)
        return ZERO


@dataclass(frozen=True, slots=True)
class YearlyInstallments:
    step: int
    anchor_month: int

    @property
    def per_year(self) -> int:
        return 12 // self.step

    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        if not is_installment_month(month, self.anchor_month, self.step):
            return ZERO
        return quantize(amount / self.per_year)


@dataclass(frozen=True, slots=True)
class YearlySpread:
    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        return quantize(amount / 12)


@dataclass(frozen=True, slots=True)
class OneTime:
    month: Optional[int]
    year: Optional[int]

    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        if self.month == month and self.year == year:
            return quantize(amount)
        return ZERO


@dataclass(frozen=True, slots=True)
class OneTimeInstallments:
    month: Optional[int]
    year: Optional[int]
    count: int
    step: int

    def installment_index(self, month: int, year: int) -> Optional[int]:
        """0-based installment number falling on (month, year), or None."""

        if self.month is None or self.year is None or self.count <= 0:
            return None
        diff = _month_index(month, year) - _month_index(self.month, self.year)
        if diff < 0 or diff % self.step != 0:
            return None
        index = diff // self.step
        if index >= self.count:
            return None
        return index

    def amount_for(self, amount: Decimal, month: int, year: int) -> Decimal:
        if self.installment_index(month, year) is None:
            return ZERO
        # Each slice is rounded on its own; the remainder cent is not redistributed.
        return quantize(amount / self.count)


Schedule = Union[
    MonthlyRecurring,
    YearlyFull,
    YearlyInstallments,
    YearlySpread,
    OneTime,
    OneTimeInstallments,
]


def schedule_for(expense: Expense) -> Schedule:
    """Pick the schedule variant that governs ``expense``."""

    strategy = _coerce(YearlyPaymentStrategy, expense.yearly_payment_strategy)

    if _coerce(ExpenseCategory, expense.category) == ExpenseCategory.ONE_TIME:
        if (
            strategy == YearlyPaymentStrategy.INSTALLMENTS
            and expense.installment_count is not None
            and expense.installment_frequency is not None
        ):
            return OneTimeInstallments(
                month=expense.month,
                year=expense.year,
                count=int(expense.installment_count),
                step=step_months(expense.installment_frequency),
            )
        return OneTime(month=expense.month, year=expense.year)

    if _coerce(ExpenseFrequency, expense.frequency) == ExpenseFrequency.YEARLY:
        if strategy == YearlyPaymentStrategy.FULL:
            return YearlyFull(payment_month=expense.payment_month)
        if strategy == YearlyPaymentStrategy.INSTALLMENTS:
            anchor = expense.created_at.month if expense.created_at is not None else 1
            return YearlyInstallments(
                step=step_months(expense.installment_frequency), anchor_month=anchor
            )
        return YearlySpread()

    return MonthlyRecurring()


def monthly_amount(expense: Expense, month: int, year: int) -> Decimal:
    """Amount of ``expense`` attributable to (month, year), rounded to cents."""

    return schedule_for(expense).amount_for(to_decimal(expense.amount), month, year)


__all__ = [
    "MonthlyRecurring",
    "OneTime",
    "OneTimeInstallments",
    "Schedule",
    "YearlyFull",
    "YearlyInstallments",
    "YearlySpread",
    "installments_per_year",
    "is_installment_month",
    "monthly_amount",
    "schedule_for",
    "step_months",
]
