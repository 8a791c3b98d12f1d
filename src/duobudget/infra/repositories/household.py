"""SQLModel implementation of Household repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...domain.members import Member
from ...models.household import HouseholdMember
from ...models.user import User
from ..database import SessionFactory


class SQLModelHouseholdRepository:
    """SQLModel-based household membership repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_membership(self, user_id: str) -> Optional[HouseholdMember]:
        with self.session_factory() as session:
            return session.exec(
                select(HouseholdMember).where(HouseholdMember.user_id == user_id)
            ).first()

    def list_members(self, household_id: str) -> list[Member]:
        """Members with their user names, ordered by join date so member order is stable."""
        with self.session_factory() as session:
            statement = (
                select(HouseholdMember, User)
                .join(User, User.id == HouseholdMember.user_id)
                .where(HouseholdMember.household_id == household_id)
                .order_by(HouseholdMember.joined_at, HouseholdMember.id)
            )
            return [
                Member(
                    user_id=membership.user_id,
                    household_id=membership.household_id,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    role=membership.role,
                )
                for membership, user in session.exec(statement).all()
            ]
