"""Settlement repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.settlement import Settlement


class SettlementRepository(Protocol):
    def get_for_period(self, household_id: str, month: int, year: int) -> Optional[Settlement]:
        """The settlement recorded for the month, if any."""
        ...

    def create(self, settlement: Settlement) -> Settlement:
        """Persist a new settlement record."""
        ...
