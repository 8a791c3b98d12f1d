"""SQLModel implementation of Expense repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.enums import ExpenseType, PaymentStatus
from ...models.expense import Expense, ExpensePaymentStatus, RecurringOverride
from ..database import SessionFactory


class SQLModelExpenseRepository:
    """Active expenses plus the per-month payment and skip marks."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_active(
        self, household_id: str, *, expense_type: Optional[ExpenseType] = None
    ) -> list[Expense]:
        with self.session_factory() as session:
            statement = select(Expense).where(
                Expense.household_id == household_id,
                Expense.deleted_at.is_(None),  # type: ignore[union-attr]
            )
            if expense_type is not None:
                statement = statement.where(Expense.type == expense_type)
            statement = statement.order_by(Expense.created_at, Expense.id)
            return list(session.exec(statement).all())

    def paid_expense_ids(self, household_id: str, month: int, year: int) -> set[str]:
        with self.session_factory() as session:
            statement = (
                select(ExpensePaymentStatus.expense_id)
                .join(Expense, Expense.id == ExpensePaymentStatus.expense_id)
                .where(
                    Expense.household_id == household_id,
                    Expense.deleted_at.is_(None),  # type: ignore[union-attr]
                    ExpensePaymentStatus.month == month,
                    ExpensePaymentStatus.year == year,
                    ExpensePaymentStatus.status == PaymentStatus.PAID,
                )
            )
            return set(session.exec(statement).all())

    def skipped_expense_ids(self, household_id: str, month: int, year: int) -> set[str]:
        with self.session_factory() as session:
            statement = (
                select(RecurringOverride.expense_id)
                .join(Expense, Expense.id == RecurringOverride.expense_id)
                .where(
                    Expense.household_id == household_id,
                    RecurringOverride.month == month,
                    RecurringOverride.year == year,
                    RecurringOverride.skipped.is_(True),  # type: ignore[attr-defined]
                )
            )
            return set(session.exec(statement).all())
