"""SQLModel implementation of Salary repository."""

from __future__ import annotations

from sqlmodel import select

from ...models.salary import Salary
from ..database import SessionFactory


class SQLModelSalaryRepository:
    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def list_for_period(self, household_id: str, month: int, year: int) -> list[Salary]:
        with self.session_factory() as session:
            statement = select(Salary).where(
                Salary.household_id == household_id,
                Salary.month == month,
                Salary.year == year,
            )
            return list(session.exec(statement).all())
