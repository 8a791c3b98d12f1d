"""Calendar helpers for (month, year) periods."""

from __future__ import annotations

from datetime import date
from typing import Optional

MAX_HISTORY_MONTHS = 60


class InvalidPeriodError(ValueError):
    """A month, year or history window outside the accepted range."""


def resolve_month_year(
    month: Optional[int], year: Optional[int], *, today: date
) -> tuple[int, int]:
    """Fill in missing month/year from ``today`` and validate the result."""

    resolved_month = today.month if month is None else int(month)
    resolved_year = today.year if year is None else int(year)
    if not 1 <= resolved_month <= 12:
        raise InvalidPeriodError(f"month must be between 1 and 12, got {resolved_month}")
    if not 1000 <= resolved_year <= 9999:
        raise InvalidPeriodError(f"year must have four digits, got {resolved_year}")
    return resolved_month, resolved_year


def validate_history_window(months: int) -> int:
    if not 1 <= months <= MAX_HISTORY_MONTHS:
        raise InvalidPeriodError(
            f"months must be between 1 and {MAX_HISTORY_MONTHS}, got {months}"
        )
    return months


def month_index(month: int, year: int) -> int:
    """Months since year 0; consecutive periods differ by one."""

    return year * 12 + (month - 1)


def shift_period(month: int, year: int, months: int) -> tuple[int, int]:
    """Move (month, year) by ``months`` (negative goes back), carrying the year."""

    index = month_index(month, year) + months
    return index % 12 + 1, index // 12


def trailing_periods(month: int, year: int, count: int) -> list[tuple[int, int]]:
    """The ``count`` periods ending at (month, year), oldest first."""

    return [shift_period(month, year, -offset) for offset in range(count - 1, -1, -1)]
