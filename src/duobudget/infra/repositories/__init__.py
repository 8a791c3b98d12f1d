"""Concrete repository implementations using SQLModel."""

from .expense import SQLModelExpenseRepository
from .household import SQLModelHouseholdRepository
from .salary import SQLModelSalaryRepository
from .saving import SQLModelSavingRepository
from .settlement import SQLModelSettlementRepository

__all__ = [
    "SQLModelExpenseRepository",
    "SQLModelHouseholdRepository",
    "SQLModelSalaryRepository",
    "SQLModelSavingRepository",
    "SQLModelSettlementRepository",
]
