"""Settlement audit records."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow


class Settlement(SQLModel, table=True):
    """Marks a household month as settled; presence alone is what counts."""

    __tablename__: ClassVar[str] = "settlement"
    __table_args__ = (
        UniqueConstraint("household_id", "month", "year", name="uq_settlement_household_period"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    household_id: str = Field(foreign_key="household.id", nullable=False, index=True)
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    amount: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    paid_by_user_id: str = Field(foreign_key="user.id", nullable=False)
    paid_to_user_id: str = Field(foreign_key="user.id", nullable=False)
    paid_at: datetime = Field(default_factory=utcnow, nullable=False)
