"""Household dashboard: fetches from repositories and runs the calculators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..domain.members import Member
from ..domain.repositories import (
    ExpenseRepository,
    HouseholdRepository,
    SalaryRepository,
    SavingRepository,
    SettlementRepository,
)
from ..logging_config import get_logger
from ..models.enums import ExpenseType
from ..models.expense import Expense
from ..models.household import HouseholdMember
from ..models.settlement import Settlement
from .expenses import ExpenseSummary, expense_data
from .income import MemberIncome, income_data, total_income
from .periods import resolve_month_year, trailing_periods, validate_history_window
from .savings import SavingsHistoryItem, SavingsSummary, calculate_savings, savings_history
from .settlement import SettlementResult, calculate_settlement

logger = get_logger(__name__)


class HouseholdMembershipError(LookupError):
    """The requesting user does not belong to any household."""


class SettlementAlreadyRecordedError(ValueError):
    """The month has already been marked as settled."""


class NothingToSettleError(ValueError):
    """Shared expenses are balanced, so there is nothing to mark as paid."""


@dataclass(slots=True)
class DashboardOverview:
    income: list[MemberIncome]
    total_default_income: Decimal
    total_current_income: Decimal
    expenses: ExpenseSummary
    savings: SavingsSummary
    settlement: SettlementResult
    month: int
    year: int


@dataclass(slots=True)
class _MonthExpenses:
    """Active expenses of a household plus the ids skipped for one month."""

    expenses: list[Expense]
    skipped_ids: set[str]

    @property
    def shared(self) -> list[Expense]:
        return [expense for expense in self.expenses if expense.type == ExpenseType.SHARED]


class DashboardService:
    """Read models for the household dashboard plus settlement recording.

    ``today`` supplies the default period when callers omit month/year; the
    calculators themselves never look at the clock.
    """

    def __init__(
        self,
        *,
        households: HouseholdRepository,
        salaries: SalaryRepository,
        expenses: ExpenseRepository,
        savings: SavingRepository,
        settlements: SettlementRepository,
        currency: str = "€",
        today: Callable[[], date] = date.today,
    ) -> None:
        self.households = households
        self.salaries = salaries
        self.expenses = expenses
        self.savings_repo = savings
        self.settlements = settlements
        self.currency = currency
        self.today = today

    # ------------------------------------------------------------------ helpers
    def _require_membership(self, user_id: str) -> HouseholdMember:
        membership = self.households.get_membership(user_id)
        if membership is None:
            logger.warning("User not in a household: %s", user_id)
            raise HouseholdMembershipError("You must be in a household to view the dashboard")
        return membership

    def _period(self, month: Optional[int], year: Optional[int]) -> tuple[int, int]:
        return resolve_month_year(month, year, today=self.today())

    def _month_expenses(self, household_id: str, month: int, year: int) -> _MonthExpenses:
        return _MonthExpenses(
            expenses=self.expenses.list_active(household_id),
            skipped_ids=self.expenses.skipped_expense_ids(household_id, month, year),
        )

    def _expense_summary(
        self,
        household_id: str,
        members: Sequence[Member],
        fetched: _MonthExpenses,
        month: int,
        year: int,
    ) -> ExpenseSummary:
        return expense_data(
            members,
            fetched.expenses,
            month,
            year,
            paid_expense_ids=self.expenses.paid_expense_ids(household_id, month, year),
            skipped_expense_ids=fetched.skipped_ids,
        )

    def _settlement(
        self,
        household_id: str,
        members: Sequence[Member],
        fetched: _MonthExpenses,
        user_id: str,
        month: int,
        year: int,
    ) -> SettlementResult:
        existing = self.settlements.get_for_period(household_id, month, year)
        return calculate_settlement(
            members,
            fetched.shared,
            user_id,
            month,
            year,
            is_settled=existing is not None,
            skipped_expense_ids=fetched.skipped_ids,
            currency=self.currency,
        )

    # ------------------------------------------------------------------ reads
    def overview(
        self, user_id: str, month: Optional[int] = None, year: Optional[int] = None
    ) -> DashboardOverview:
        """Income, expenses, savings and settlement for the user's household."""

        membership = self._require_membership(user_id)
        month, year = self._period(month, year)
        household_id = membership.household_id
        logger.debug("Dashboard overview for user %s (%02d/%d)", user_id, month, year)

        members = self.households.list_members(household_id)
        fetched = self._month_expenses(household_id, month, year)
        income = income_data(
            members, self.salaries.list_for_period(household_id, month, year), month, year
        )
        expenses = self._expense_summary(household_id, members, fetched, month, year)
        savings = calculate_savings(
            income,
            expenses,
            self.savings_repo.list_for_period(household_id, month, year),
            month,
            year,
        )
        total_default, total_current = total_income(income)

        return DashboardOverview(
            income=income,
            total_default_income=total_default,
            total_current_income=total_current,
            expenses=expenses,
            savings=savings,
            settlement=self._settlement(household_id, members, fetched, user_id, month, year),
            month=month,
            year=year,
        )

    def savings(
        self, user_id: str, month: Optional[int] = None, year: Optional[int] = None
    ) -> SavingsSummary:
        membership = self._require_membership(user_id)
        month, year = self._period(month, year)
        household_id = membership.household_id
        logger.debug("Savings for user %s (%02d/%d)", user_id, month, year)

        members = self.households.list_members(household_id)
        income = income_data(
            members, self.salaries.list_for_period(household_id, month, year), month, year
        )
        fetched = self._month_expenses(household_id, month, year)
        return calculate_savings(
            income,
            self._expense_summary(household_id, members, fetched, month, year),
            self.savings_repo.list_for_period(household_id, month, year),
            month,
            year,
        )

    def settlement(
        self, user_id: str, month: Optional[int] = None, year: Optional[int] = None
    ) -> SettlementResult:
        membership = self._require_membership(user_id)
        month, year = self._period(month, year)
        household_id = membership.household_id
        logger.debug("Settlement for user %s (%02d/%d)", user_id, month, year)
        members = self.households.list_members(household_id)
        fetched = self._month_expenses(household_id, month, year)
        return self._settlement(household_id, members, fetched, user_id, month, year)

    def savings_history(
        self,
        user_id: str,
        months: int = 6,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[SavingsHistoryItem]:
        """Household saving totals for the ``months`` periods ending at (month, year).

        Raises:
            InvalidPeriodError: ``months`` is outside 1..MAX_HISTORY_MONTHS
        """

        validate_history_window(months)
        membership = self._require_membership(user_id)
        month, year = self._period(month, year)
        periods = trailing_periods(month, year, months)
        records = self.savings_repo.list_for_periods(membership.household_id, periods)
        return savings_history(records, periods)

    # ------------------------------------------------------------------ writes
    def mark_settlement_paid(
        self, user_id: str, month: Optional[int] = None, year: Optional[int] = None
    ) -> Settlement:
        """Record that the ower has paid this month's settlement.

        Raises:
            HouseholdMembershipError: the user has no household
            SettlementAlreadyRecordedError: the month is already settled
            NothingToSettleError: shared expenses are balanced
        """

        logger.info("Mark settlement paid requested by user %s", user_id)
        membership = self._require_membership(user_id)
        month, year = self._period(month, year)
        household_id = membership.household_id

        if self.settlements.get_for_period(household_id, month, year) is not None:
            logger.warning(
                "Settlement already recorded for household %s (%02d/%d)", household_id, month, year
            )
            raise SettlementAlreadyRecordedError(
                "Settlement has already been marked as paid for this month"
            )

        members = self.households.list_members(household_id)
        fetched = self._month_expenses(household_id, month, year)
        result = self._settlement(household_id, members, fetched, user_id, month, year)
        if result.is_balanced or result.owed_by_user_id is None or result.owed_to_user_id is None:
            logger.warning(
                "No settlement needed for household %s (%02d/%d)", household_id, month, year
            )
            raise NothingToSettleError("No settlement needed — shared expenses are balanced")

        record = self.settlements.create(
            Settlement(
                household_id=household_id,
                month=month,
                year=year,
                amount=result.amount,
                paid_by_user_id=result.owed_by_user_id,
                paid_to_user_id=result.owed_to_user_id,
            )
        )
        logger.info(
            "Settlement %s recorded for household %s",
            record.id,
            household_id,
            extra={"amount": str(record.amount), "month": month, "year": year},
        )
        return record


def build_dashboard_service(session_factory, *, currency: str = "€") -> DashboardService:
    """Wire a ``DashboardService`` to the SQLModel repositories."""

    from ..infra.repositories import (
        SQLModelExpenseRepository,
        SQLModelHouseholdRepository,
        SQLModelSalaryRepository,
        SQLModelSavingRepository,
        SQLModelSettlementRepository,
    )

    return DashboardService(
        households=SQLModelHouseholdRepository(session_factory),
        salaries=SQLModelSalaryRepository(session_factory),
        expenses=SQLModelExpenseRepository(session_factory),
        savings=SQLModelSavingRepository(session_factory),
        settlements=SQLModelSettlementRepository(session_factory),
        currency=currency,
    )
