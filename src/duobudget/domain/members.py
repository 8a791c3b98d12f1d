"""Member view consumed by the calculators."""

from __future__ import annotations

from dataclasses import dataclass

from ..models.enums import HouseholdRole


@dataclass(frozen=True, slots=True)
class Member:
    """A household member joined with the user's display name."""

    user_id: str
    household_id: str
    first_name: str
    last_name: str = ""
    role: HouseholdRole = HouseholdRole.MEMBER
