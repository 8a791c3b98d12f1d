"""Monthly salary records."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow


class Salary(SQLModel, table=True):
    """Baseline and actual pay of one member for one month."""

    __tablename__: ClassVar[str] = "salary"
    __table_args__ = (UniqueConstraint("user_id", "month", "year", name="uq_salary_user_period"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    user_id: str = Field(foreign_key="user.id", nullable=False, index=True)
    household_id: str = Field(foreign_key="household.id", nullable=False, index=True)
    default_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    current_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
