"""HTTP tests for the dashboard blueprint."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from sqlmodel import select

from duobudget.models import Expense
from duobudget.services.settlement import BALANCED_MESSAGE


def _get(client, path, user_id, **params):
    return client.get(path, headers={"X-User-Id": user_id}, query_string=params)


class TestReadRoutes:
    def test_overview(self, client, seeded):
        response = _get(client, "/dashboard/", seeded["sam"], month=1, year=2026)

        assert response.status_code == 200
        body = response.get_json()
        assert body["month"] == 1 and body["year"] == 2026
        assert body["totalDefaultIncome"] == 5500.0
        assert body["income"][0]["firstName"] == "Alex"
        assert body["income"][1]["currentSalary"] == 2500.0
        assert body["expenses"]["sharedExpensesTotal"] == 1520.0
        assert body["expenses"]["personalExpenses"][0]["personalExpensesTotal"] == 0.0
        assert body["savings"]["totalSharedSavings"] == 250.0
        assert body["settlement"] == {
            "amount": 60.0,
            "owedByUserId": seeded["sam"],
            "owedByFirstName": "Sam",
            "owedToUserId": seeded["alex"],
            "owedToFirstName": "Alex",
            "message": "You owe Alex €60.00",
            "isSettled": False,
            "month": 1,
            "year": 2026,
        }

    def test_overview_defaults_to_current_month(self, client, seeded):
        body = _get(client, "/dashboard/", seeded["alex"]).get_json()
        today = date.today()
        assert (body["month"], body["year"]) == (today.month, today.year)

    def test_savings(self, client, seeded):
        body = _get(client, "/dashboard/savings", seeded["alex"], month=1, year=2026).get_json()

        alex_row = body["members"][0]
        # 3000 - 760 - 250
        assert alex_row["remainingBudget"] == 1990.0
        assert alex_row["sharedSavings"] == 250.0
        assert body["totalSavings"] == 250.0

    def test_settlement(self, client, seeded):
        body = _get(client, "/dashboard/settlement", seeded["alex"], month=1, year=2026).get_json()
        assert body["message"] == "Sam owes you €60.00"

    def test_recurring_bills_apply_to_any_month(self, client, seeded):
        body = _get(client, "/dashboard/settlement", seeded["alex"], month=2, year=2025).get_json()
        # recurring monthly bills apply to every month
        assert body["amount"] == 60.0

    def test_savings_history(self, client, seeded):
        response = _get(client, "/dashboard/savings/history", seeded["alex"], months=2, month=1, year=2026)

        assert response.status_code == 200
        assert response.get_json() == [
            {"month": 12, "year": 2025, "personalSavings": 100.0, "sharedSavings": 0.0},
            {"month": 1, "year": 2026, "personalSavings": 0.0, "sharedSavings": 250.0},
        ]

    def test_savings_history_uses_configured_window(self, app, client, seeded):
        app.config["HISTORY_MONTHS"] = 4
        body = _get(client, "/dashboard/savings/history", seeded["alex"], month=1, year=2026).get_json()
        assert [(item["month"], item["year"]) for item in body] == [(10, 2025), (11, 2025), (12, 2025), (1, 2026)]


class TestMarkSettlementPaid:
    def test_mark_paid_then_conflict(self, client, seeded):
        headers = {"X-User-Id": seeded["sam"]}
        response = client.post("/dashboard/settlement/paid?month=1&year=2026", headers=headers)

        assert response.status_code == 201
        record = response.get_json()
        assert record["amount"] == 60.0
        assert record["paidByUserId"] == seeded["sam"]
        assert record["paidToUserId"] == seeded["alex"]
        assert record["paidAt"]

        settled = _get(client, "/dashboard/settlement", seeded["sam"], month=1, year=2026).get_json()
        assert settled["isSettled"] is True

        again = client.post("/dashboard/settlement/paid?month=1&year=2026", headers=headers)
        assert again.status_code == 409
        assert again.get_json()["error"] == "Conflict"

    def test_nothing_to_settle(self, client, seeded, app):
        with app.extensions["duobudget.session_factory"]() as session:
            fronted = session.exec(select(Expense).where(Expense.paid_by_user_id.is_not(None)))
            for expense in fronted.all():
                expense.deleted_at = datetime(2025, 12, 31, tzinfo=timezone.utc)

        response = client.post(
            "/dashboard/settlement/paid?month=1&year=2026", headers={"X-User-Id": seeded["alex"]}
        )
        assert response.status_code == 400
        assert "balanced" in response.get_json()["message"]

        body = _get(client, "/dashboard/settlement", seeded["alex"], month=1, year=2026).get_json()
        assert body["message"] == BALANCED_MESSAGE


class TestErrors:
    def test_missing_user_header(self, client, seeded):
        response = client.get("/dashboard/")
        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthorized"

    def test_user_without_household(self, client, seeded):
        response = _get(client, "/dashboard/", seeded["loner"])
        assert response.status_code == 404
        assert "household" in response.get_json()["message"]

    @pytest.mark.parametrize("params", [{"month": "13", "year": "2026"}, {"month": "jan"}, {"months": "0"}])
    def test_bad_parameters(self, client, seeded, params):
        path = "/dashboard/savings/history" if "months" in params else "/dashboard/"
        response = _get(client, path, seeded["alex"], **params)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Bad Request"

    @pytest.mark.parametrize("months", ["61", "2000"])
    def test_history_window_too_long(self, client, seeded, months):
        response = _get(client, "/dashboard/savings/history", seeded["alex"], months=months)

        assert response.status_code == 400
        body = response.get_json()
        assert body["error"] == "Bad Request"
        assert body["message"] == f"months must be between 1 and 60, got {months}"

    def test_longest_history_window(self, client, seeded):
        response = _get(client, "/dashboard/savings/history", seeded["alex"], months=60, month=1, year=2026)

        assert response.status_code == 200
        assert len(response.get_json()) == 60

    def test_unrelated_value_error_is_not_a_bad_request(self, app, client, seeded):
        class _BrokenService:
            def overview(self, user_id, month=None, year=None):
                raise ValueError("corrupt salary row")

        app.extensions["dashboard"]["service"] = _BrokenService()

        with pytest.raises(ValueError, match="corrupt salary row"):
            _get(client, "/dashboard/", seeded["alex"])
