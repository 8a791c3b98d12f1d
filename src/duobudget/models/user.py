"""User accounts as seen by the budgeting backend."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ._ids import new_id, utcnow


class User(SQLModel, table=True):
    """A registered person; credentials live with the auth service."""

    __tablename__: ClassVar[str] = "user"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    first_name: str = Field(nullable=False, max_length=64)
    last_name: str = Field(default="", nullable=False, max_length=64)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    deleted_at: Optional[datetime] = Field(default=None)
