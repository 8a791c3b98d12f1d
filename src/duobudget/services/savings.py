"""Savings splits and remaining budget per member."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Collection, Iterable, Sequence

from ..domain.members import Member
from ..models.expense import Expense
from ..models.salary import Salary
from ..models.saving import Saving
from .expenses import ExpenseSummary, expense_data
from .income import MemberIncome, income_data
from .money import ZERO, money_sum, quantize, to_decimal


@dataclass(slots=True)
class MemberSavings:
    user_id: str
    first_name: str
    last_name: str
    personal_savings: Decimal
    shared_savings: Decimal
    remaining_budget: Decimal


@dataclass(slots=True)
class SavingsSummary:
    members: list[MemberSavings] = field(default_factory=list)
    total_personal_savings: Decimal = ZERO
    total_shared_savings: Decimal = ZERO
    total_savings: Decimal = ZERO
    total_remaining_budget: Decimal = ZERO


@dataclass(slots=True)
class SavingsHistoryItem:
    month: int
    year: int
    personal_savings: Decimal
    shared_savings: Decimal


def _in_period(records: Iterable[Saving], month: int, year: int) -> list[Saving]:
    return [record for record in records if record.month == month and record.year == year]


def calculate_savings(
    income: Sequence[MemberIncome],
    expenses: ExpenseSummary,
    savings: Iterable[Saving],
    month: int,
    year: int,
) -> SavingsSummary:
    """Combine income, expense totals and saving records into per-member budgets.

    remaining budget = current salary - personal expenses - shared expenses / members
                       - savings that come out of the salary
    """

    records = _in_period(savings, month, year)
    member_count = len(income) or 1
    shared_share = expenses.shared_expenses_total / member_count

    members: list[MemberSavings] = []
    for row in income:
        own = [record for record in records if record.user_id == row.user_id]
        personal = [record for record in own if not record.is_shared]
        shared = [record for record in own if record.is_shared]
        deductions = sum(
            (to_decimal(record.amount) for record in own if record.reduces_from_salary is not False),
            Decimal("0"),
        )
        remaining = (
            row.current_salary
            - expenses.personal_total_for(row.user_id)
            - shared_share
            - deductions
        )
        members.append(
            MemberSavings(
                user_id=row.user_id,
                first_name=row.first_name,
                last_name=row.last_name,
                personal_savings=money_sum(record.amount for record in personal),
                shared_savings=money_sum(record.amount for record in shared),
                remaining_budget=quantize(remaining),
            )
        )

    total_personal = money_sum(m.personal_savings for m in members)
    total_shared = money_sum(m.shared_savings for m in members)
    return SavingsSummary(
        members=members,
        total_personal_savings=total_personal,
        total_shared_savings=total_shared,
        total_savings=quantize(total_personal + total_shared),
        total_remaining_budget=money_sum(m.remaining_budget for m in members),
    )


def calculate_household_savings(
    members: Sequence[Member],
    salaries: Iterable[Salary],
    expenses: Iterable[Expense],
    savings: Iterable[Saving],
    month: int,
    year: int,
    *,
    paid_expense_ids: Collection[str] = (),
    skipped_expense_ids: Collection[str] = (),
) -> SavingsSummary:
    """Run the income and expense aggregators, then ``calculate_savings``."""

    income = income_data(members, salaries, month, year)
    summary = expense_data(
        members,
        expenses,
        month,
        year,
        paid_expense_ids=paid_expense_ids,
        skipped_expense_ids=skipped_expense_ids,
    )
    return calculate_savings(income, summary, savings, month, year)


def savings_history(
    savings: Iterable[Saving], periods: Sequence[tuple[int, int]]
) -> list[SavingsHistoryItem]:
    """Household personal/shared saving totals for each (month, year) in ``periods``."""

    records = list(savings)
    history: list[SavingsHistoryItem] = []
    for month, year in periods:
        in_period = _in_period(records, month, year)
        history.append(
            SavingsHistoryItem(
                month=month,
                year=year,
                personal_savings=money_sum(r.amount for r in in_period if not r.is_shared),
                shared_savings=money_sum(r.amount for r in in_period if r.is_shared),
            )
        )
    return history
