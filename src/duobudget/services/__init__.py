"""Service module exports."""

from . import (
    dashboard,
    expenses,
    income,
    money,
    periods,
    savings,
    schedule,
    settlement,
)

__all__ = [
    "dashboard",
    "expenses",
    "income",
    "money",
    "periods",
    "savings",
    "schedule",
    "settlement",
]
