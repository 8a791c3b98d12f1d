"""Saving repository protocol."""

from __future__ import annotations

from typing import Protocol, Sequence

from ...models.saving import Saving


class SavingRepository(Protocol):
    def list_for_period(self, household_id: str, month: int, year: int) -> list[Saving]:
        ...

    def list_for_periods(
        self, household_id: str, periods: Sequence[tuple[int, int]]
    ) -> list[Saving]:
        """Savings falling in any of the given (month, year) periods."""
        ...
