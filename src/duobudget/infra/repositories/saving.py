"""SQLModel implementation of Saving repository."""

from __future__ import annotations

from typing import Sequence

from sqlmodel import select

from ...models.saving import Saving
from ..database import SessionFactory


class SQLModelSavingRepository:
    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_for_period(self, household_id: str, month: int, year: int) -> list[Saving]:
        return self.list_for_periods(household_id, [(month, year)])

    def list_for_periods(
        self, household_id: str, periods: Sequence[tuple[int, int]]
    ) -> list[Saving]:
        """Savings for any of ``periods``, oldest first.

        One query over the covered years, narrowed to the wanted
        (month, year) pairs in Python.
        """
        if not periods:
            return []
        wanted = set(periods)
        years = [year for _, year in wanted]
        with self.session_factory() as session:
            statement = (
                select(Saving)
                .where(Saving.household_id == household_id)
                .where(Saving.year >= min(years))
                .where(Saving.year <= max(years))
                .order_by(Saving.year, Saving.month)
            )
            rows = session.exec(statement).all()
        return [saving for saving in rows if (saving.month, saving.year) in wanted]
