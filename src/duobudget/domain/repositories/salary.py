"""Salary repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...models.salary import Salary


class SalaryRepository(Protocol):
    def list_for_period(self, household_id: str, month: int, year: int) -> list[Salary]:
        """Salaries of every member for one month."""
        ...
