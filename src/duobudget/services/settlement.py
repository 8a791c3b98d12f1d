"""Pairwise settlement of shared expenses between two household members."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Collection, Iterable, Optional, Sequence

from ..domain.members import Member
from ..logging_config import get_logger
from ..models.enums import ExpenseType
from ..models.expense import Expense
from .expenses import active_expenses
from .money import ZERO, format_amount, quantize
from .schedule import monthly_amount

logger = get_logger(__name__)

BALANCED_MESSAGE = "All shared expenses are balanced — no settlement needed."


@dataclass(slots=True)
class SettlementResult:
    amount: Decimal
    owed_by_user_id: Optional[str]
    owed_by_first_name: Optional[str]
    owed_to_user_id: Optional[str]
    owed_to_first_name: Optional[str]
    message: str
    is_settled: bool
    month: int
    year: int

    @property
    def is_balanced(self) -> bool:
        return self.amount == ZERO


def net_balance(
    members: Sequence[Member], shared_expenses: Iterable[Expense], month: int, year: int
) -> Decimal:
    """Signed balance relative to ``members[0]``: positive means members[1] owes members[0].

    A member who fronted a shared expense is credited the other member's half.
    Expenses split equally (no payer) or fronted by a non-member shift nothing.
    """

    first, second = members[0].user_id, members[1].user_id
    balance = Decimal("0")
    for expense in shared_expenses:
        if expense.type != ExpenseType.SHARED or not expense.paid_by_user_id:
            continue
        half = monthly_amount(expense, month, year) / 2
        if expense.paid_by_user_id == first:
            balance += half
        elif expense.paid_by_user_id == second:
            balance -= half
    return balance


def _message(
    ower: Member, owee: Member, amount: Decimal, requesting_user_id: str, currency: str
) -> str:
    formatted = format_amount(amount, currency)
    if requesting_user_id == ower.user_id:
        return f"You owe {owee.first_name} {formatted}"
    if requesting_user_id == owee.user_id:
        return f"{ower.first_name} owes you {formatted}"
    return f"{ower.first_name} owes {owee.first_name} {formatted}"


def calculate_settlement(
    members: Sequence[Member],
    shared_expenses: Iterable[Expense],
    requesting_user_id: str,
    month: int,
    year: int,
    *,
    is_settled: bool = False,
    skipped_expense_ids: Collection[str] = (),
    currency: str = "€",
) -> SettlementResult:
    """Work out who owes whom for (month, year).

    ``is_settled`` only flags the month; the computed amount and message are
    still returned so the dashboard can show what was settled.
    """

    balanced = SettlementResult(
        amount=ZERO,
        owed_by_user_id=None,
        owed_by_first_name=None,
        owed_to_user_id=None,
        owed_to_first_name=None,
        message=BALANCED_MESSAGE,
        is_settled=is_settled,
        month=month,
        year=year,
    )

    if len(members) != 2:
        if len(members) > 2:
            logger.warning(
                "Settlement is pairwise; household has %d members", len(members)
            )
        return balanced

    expenses = active_expenses(shared_expenses, skipped_expense_ids)
    balance = quantize(net_balance(members, expenses, month, year))
    if balance == ZERO:
        return balanced

    if balance > 0:
        owee, ower = members[0], members[1]
    else:
        ower, owee = members[0], members[1]
    amount = abs(balance)

    return SettlementResult(
        amount=amount,
        owed_by_user_id=ower.user_id,
        owed_by_first_name=ower.first_name,
        owed_to_user_id=owee.user_id,
        owed_to_first_name=owee.first_name,
        message=_message(ower, owee, amount, requesting_user_id, currency),
        is_settled=is_settled,
        month=month,
        year=year,
    )
