"""Expense aggregation for a household month."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Collection, Iterable, Sequence

from ..domain.members import Member
from ..models.enums import ExpenseType
from ..models.expense import Expense
from .money import ZERO, money_sum, quantize
from .schedule import monthly_amount


@dataclass(slots=True)
class MemberExpenseSummary:
    user_id: str
    first_name: str
    last_name: str
    personal_expenses_total: Decimal
    remaining_expenses: Decimal


@dataclass(slots=True)
class ExpenseSummary:
    """Monthly expense picture of a household.

    ``remaining_*`` figures leave out expenses marked PAID for the month.
    """

    personal_expenses: list[MemberExpenseSummary] = field(default_factory=list)
    shared_expenses_total: Decimal = ZERO
    total_household_expenses: Decimal = ZERO
    remaining_household_expenses: Decimal = ZERO

    def personal_total_for(self, user_id: str) -> Decimal:
        for row in self.personal_expenses:
            if row.user_id == user_id:
                return row.personal_expenses_total
        return ZERO


def active_expenses(
    expenses: Iterable[Expense], skipped_expense_ids: Collection[str] = ()
) -> list[Expense]:
    """Drop soft-deleted expenses and those skipped for the month."""

    return [
        expense
        for expense in expenses
        if not expense.is_deleted and expense.id not in skipped_expense_ids
    ]


def expense_data(
    members: Sequence[Member],
    expenses: Iterable[Expense],
    month: int,
    year: int,
    *,
    paid_expense_ids: Collection[str] = (),
    skipped_expense_ids: Collection[str] = (),
) -> ExpenseSummary:
    """Partition and sum the household's expenses for (month, year).

    Personal expenses are attributed to their creator; shared expenses are
    summed household-wide regardless of who created or paid them.
    """

    candidates = active_expenses(expenses, skipped_expense_ids)
    resolved = [(expense, monthly_amount(expense, month, year)) for expense in candidates]

    personal_expenses: list[MemberExpenseSummary] = []
    for member in members:
        own = [
            (expense, amount)
            for expense, amount in resolved
            if expense.type == ExpenseType.PERSONAL and expense.created_by_id == member.user_id
        ]
        personal_expenses.append(
            MemberExpenseSummary(
                user_id=member.user_id,
                first_name=member.first_name,
                last_name=member.last_name,
                personal_expenses_total=money_sum(amount for _, amount in own),
                remaining_expenses=money_sum(
                    amount for expense, amount in own if expense.id not in paid_expense_ids
                ),
            )
        )

    shared = [(expense, amount) for expense, amount in resolved if expense.type == ExpenseType.SHARED]
    shared_total = money_sum(amount for _, amount in shared)
    paid_shared = money_sum(amount for expense, amount in shared if expense.id in paid_expense_ids)

    total_personal = money_sum(row.personal_expenses_total for row in personal_expenses)
    remaining_personal = money_sum(row.remaining_expenses for row in personal_expenses)

    return ExpenseSummary(
        personal_expenses=personal_expenses,
        shared_expenses_total=shared_total,
        total_household_expenses=quantize(total_personal + shared_total),
        remaining_household_expenses=quantize(remaining_personal + shared_total - paid_shared),
    )
