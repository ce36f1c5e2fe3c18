from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[str] = None,
    ) -> Sequence[Shift]:
        """Shifts whose clock-in falls on a local date within [start_date, end_date]."""

        raise NotImplementedError
