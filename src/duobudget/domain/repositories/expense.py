"""Expense repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.enums import ExpenseType
from ...models.expense import Expense


class ExpenseRepository(Protocol):
    """Read access to active expenses and their monthly overrides."""

    def list_active(
        self, household_id: str, *, expense_type: Optional[ExpenseType] = None
    ) -> list[Expense]:
        """Non-deleted expenses of the household, optionally of one type."""
        ...

    def paid_expense_ids(self, household_id: str, month: int, year: int) -> set[str]:
        """Ids of expenses marked PAID for the month."""
        ...

    def skipped_expense_ids(self, household_id: str, month: int, year: int) -> set[str]:
        """Ids of recurring expenses skipped for the month."""
        ...
