"""SQLModel definitions for expenses and their per-month overrides."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow
from .enums import (
    ExpenseCategory,
    ExpenseFrequency,
    ExpenseType,
    InstallmentFrequency,
    PaymentStatus,
    YearlyPaymentStrategy,
)


class Expense(SQLModel, table=True):
    """A personal or shared cost, recurring or one-time.

    Which date columns are authoritative depends on ``category`` and
    ``frequency``; see ``duobudget.services.schedule.schedule_for``.
    """

    __tablename__: ClassVar[str] = "expense"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    household_id: str = Field(foreign_key="household.id", nullable=False, index=True)
    created_by_id: str = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(default="", max_length=100)
    amount: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    type: ExpenseType = Field(nullable=False, index=True)
    category: ExpenseCategory = Field(default=ExpenseCategory.RECURRING, nullable=False)
    frequency: ExpenseFrequency = Field(default=ExpenseFrequency.MONTHLY, nullable=False)

    # Yearly recurring / one-time installment plans
    yearly_payment_strategy: Optional[YearlyPaymentStrategy] = Field(default=None)
    installment_frequency: Optional[InstallmentFrequency] = Field(default=None)
    installment_count: Optional[int] = Field(default=None)
    payment_month: Optional[int] = Field(default=None, ge=1, le=12)

    # SHARED only: null means split equally, otherwise this member fronted it all
    paid_by_user_id: Optional[str] = Field(default=None, foreign_key="user.id")

    # ONE_TIME occurrence (or first installment)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    deleted_at: Optional[datetime] = Field(default=None, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class ExpensePaymentStatus(SQLModel, table=True):
    """Per-month payment mark for a bill."""

    __tablename__: ClassVar[str] = "expense_payment_status"
    __table_args__ = (
        UniqueConstraint("expense_id", "month", "year", name="uq_payment_status_expense_period"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    expense_id: str = Field(foreign_key="expense.id", nullable=False, index=True)
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    status: PaymentStatus = Field(default=PaymentStatus.PENDING, nullable=False)
    paid_by_id: str = Field(foreign_key="user.id", nullable=False)
    paid_at: Optional[datetime] = Field(default=None)


class RecurringOverride(SQLModel, table=True):
    """Per-month adjustment of a recurring expense; ``skipped`` drops it for that month."""

    __tablename__: ClassVar[str] = "recurring_override"
    __table_args__ = (
        UniqueConstraint("expense_id", "month", "year", name="uq_recurring_override_expense_period"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    expense_id: str = Field(foreign_key="expense.id", nullable=False, index=True)
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    skipped: bool = Field(default=False, nullable=False)
