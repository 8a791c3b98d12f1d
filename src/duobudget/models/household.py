"""Household and membership tables."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow
from .enums import HouseholdRole


class Household(SQLModel, table=True):
    """The shared-budget group."""

    __tablename__: ClassVar[str] = "household"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: str = Field(nullable=False, max_length=80)
    invite_code: str = Field(nullable=False, unique=True, index=True, max_length=16)
    max_members: int = Field(default=2, nullable=False, ge=1)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)


class HouseholdMember(SQLModel, table=True):
    """Links a user to exactly one household."""

    __tablename__: ClassVar[str] = "household_member"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    # unique: a user belongs to at most one household at a time
    user_id: str = Field(foreign_key="user.id", nullable=False, unique=True, index=True)
    household_id: str = Field(foreign_key="household.id", nullable=False, index=True)
    role: HouseholdRole = Field(default=HouseholdRole.MEMBER, nullable=False)
    joined_at: datetime = Field(default_factory=utcnow, nullable=False)
