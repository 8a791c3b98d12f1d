"""Repository protocol definitions for domain layer."""

from .expense import ExpenseRepository
from .household import HouseholdRepository
from .salary import SalaryRepository
from .saving import SavingRepository
from .settlement import SettlementRepository

__all__ = [
    "ExpenseRepository",
    "HouseholdRepository",
    "SalaryRepository",
    "SavingRepository",
    "SettlementRepository",
]
