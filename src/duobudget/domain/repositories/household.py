"""Household repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.household import HouseholdMember
from ..members import Member


class HouseholdRepository(Protocol):
    """Read access to household membership."""

    def get_membership(self, user_id: str) -> Optional[HouseholdMember]:
        """Return the user's membership row, if any."""
        ...

    def list_members(self, household_id: str) -> list[Member]:
        """Members joined with their names, oldest membership first."""
        ...
