"""SQLModel table exports."""

from .enums import (
    ExpenseCategory,
    ExpenseFrequency,
    ExpenseType,
    HouseholdRole,
    InstallmentFrequency,
    PaymentStatus,
    YearlyPaymentStrategy,
)
from .expense import Expense, ExpensePaymentStatus, RecurringOverride
from .household import Household, HouseholdMember
from .salary import Salary
from .saving import Saving
from .settlement import Settlement
from .user import User

__all__ = [
    "Expense",
    "ExpenseCategory",
    "ExpenseFrequency",
    "ExpensePaymentStatus",
    "ExpenseType",
    "Household",
    "HouseholdMember",
    "HouseholdRole",
    "InstallmentFrequency",
    "PaymentStatus",
    "RecurringOverride",
    "Salary",
    "Saving",
    "Settlement",
    "User",
    "YearlyPaymentStrategy",
]
