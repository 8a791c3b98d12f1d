"""Recorded saving contributions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow


class Saving(SQLModel, table=True):
    """Money a member put aside in a month, personally or into the household pool."""

    __tablename__: ClassVar[str] = "saving"
    __table_args__ = (
        UniqueConstraint("user_id", "month", "year", "is_shared", name="uq_saving_user_period_kind"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    user_id: str = Field(foreign_key="user.id", nullable=False, index=True)
    household_id: str = Field(foreign_key="household.id", nullable=False, index=True)
    amount: Decimal = Field(max_digits=12, decimal_places=2, nullable=False)
    month: int = Field(nullable=False, ge=1, le=12)
    year: int = Field(nullable=False)
    is_shared: bool = Field(default=False, nullable=False)
    # False when the money came from outside the salary (gift, bonus account, ...)
    reduces_from_salary: bool = Field(default=True, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
