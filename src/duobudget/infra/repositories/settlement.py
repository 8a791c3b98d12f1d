"""SQLModel implementation of Settlement repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.settlement import Settlement
from ..database import SessionFactory


class SQLModelSettlementRepository:
    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_for_period(self, household_id: str, month: int, year: int) -> Optional[Settlement]:
        with self.session_factory() as session:
            return session.exec(
                select(Settlement).where(
                    Settlement.household_id == household_id,
                    Settlement.month == month,
                    Settlement.year == year,
                )
            ).first()

    def create(self, settlement: Settlement) -> Settlement:
        with self.session_factory() as session:
            session.add(settlement)
            session.commit()
            session.refresh(settlement)
            session.expunge(settlement)
            return settlement
