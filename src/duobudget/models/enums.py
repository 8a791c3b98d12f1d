"""Enumerations shared by the household budgeting tables."""

from __future__ import annotations

from enum import Enum


class HouseholdRole(str, Enum):
    OWNER = "OWNER"
    MEMBER = "MEMBER"


class ExpenseType(str, Enum):
    PERSONAL = "PERSONAL"
    SHARED = "SHARED"


class ExpenseCategory(str, Enum):
    RECURRING = "RECURRING"
    ONE_TIME = "ONE_TIME"


class ExpenseFrequency(str, Enum):
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class YearlyPaymentStrategy(str, Enum):
    FULL = "FULL"
    INSTALLMENTS = "INSTALLMENTS"


class InstallmentFrequency(str, Enum):
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUAL = "SEMI_ANNUAL"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
