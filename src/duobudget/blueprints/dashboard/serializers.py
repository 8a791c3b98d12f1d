"""JSON shapes for dashboard responses.

Money leaves as 2-decimal floats, keys are camelCase.
"""

from __future__ import annotations

from typing import Any

from ...models.settlement import Settlement
from ...services.dashboard import DashboardOverview
from ...services.expenses import ExpenseSummary
from ...services.income import MemberIncome
from ...services.money import as_float
from ...services.savings import SavingsHistoryItem, SavingsSummary
from ...services.settlement import SettlementResult


def income_json(row: MemberIncome) -> dict[str, Any]:
    return {
        "userId": row.user_id,
        "firstName": row.first_name,
        "lastName": row.last_name,
        "defaultSalary": as_float(row.default_salary),
        "currentSalary": as_float(row.current_salary),
    }


def expenses_json(summary: ExpenseSummary) -> dict[str, Any]:
    return {
        "personalExpenses": [
            {
                "userId": row.user_id,
                "firstName": row.first_name,
                "lastName": row.last_name,
                "personalExpensesTotal": as_float(row.personal_expenses_total),
                "remainingExpenses": as_float(row.remaining_expenses),
            }
            for row in summary.personal_expenses
        ],
        "sharedExpensesTotal": as_float(summary.shared_expenses_total),
        "totalHouseholdExpenses": as_float(summary.total_household_expenses),
        "remainingHouseholdExpenses": as_float(summary.remaining_household_expenses),
    }


def savings_json(summary: SavingsSummary) -> dict[str, Any]:
    return {
        "members": [
            {
                "userId": row.user_id,
                "firstName": row.first_name,
                "lastName": row.last_name,
                "personalSavings": as_float(row.personal_savings),
                "sharedSavings": as_float(row.shared_savings),
                "remainingBudget": as_float(row.remaining_budget),
            }
            for row in summary.members
        ],
        "totalPersonalSavings": as_float(summary.total_personal_savings),
        "totalSharedSavings": as_float(summary.total_shared_savings),
        "totalSavings": as_float(summary.total_savings),
        "totalRemainingBudget": as_float(summary.total_remaining_budget),
    }


def settlement_json(result: SettlementResult) -> dict[str, Any]:
    return {
        "amount": as_float(result.amount),
        "owedByUserId": result.owed_by_user_id,
        "owedByFirstName": result.owed_by_first_name,
        "owedToUserId": result.owed_to_user_id,
        "owedToFirstName": result.owed_to_first_name,
        "message": result.message,
        "isSettled": result.is_settled,
        "month": result.month,
        "year": result.year,
    }


def settlement_record_json(record: Settlement) -> dict[str, Any]:
    return {
        "id": record.id,
        "householdId": record.household_id,
        "month": record.month,
        "year": record.year,
        "amount": as_float(record.amount),
        "paidByUserId": record.paid_by_user_id,
        "paidToUserId": record.paid_to_user_id,
        "paidAt": record.paid_at.isoformat() if record.paid_at else None,
    }


def history_json(items: list[SavingsHistoryItem]) -> list[dict[str, Any]]:
    return [
        {
            "month": item.month,
            "year": item.year,
            "personalSavings": as_float(item.personal_savings),
            "sharedSavings": as_float(item.shared_savings),
        }
        for item in items
    ]


def overview_json(overview: DashboardOverview) -> dict[str, Any]:
    return {
        "income": [income_json(row) for row in overview.income],
        "totalDefaultIncome": as_float(overview.total_default_income),
        "totalCurrentIncome": as_float(overview.total_current_income),
        "expenses": expenses_json(overview.expenses),
        "savings": savings_json(overview.savings),
        "settlement": settlement_json(overview.settlement),
        "month": overview.month,
        "year": overview.year,
    }
