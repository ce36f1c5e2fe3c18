from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..payroll.model import ShiftTotals


@dataclass(frozen=True)
class TimesheetWeek:
    """Shifts of one employee inside one pay week."""

    key: str
    week_end: datetime
    shifts: tuple[ShiftTotals, ...]
    total_minutes: float
    travel_minutes: int
    finalized: bool

    @property
    def payable_minutes(self) -> float:
        return self.total_minutes + self.travel_minutes


@dataclass(frozen=True)
class EmployeeTimesheet:
    user_id: str
    name: str
    email: Optional[str]
    weeks: tuple[TimesheetWeek, ...]

    @property
    def total_minutes(self) -> float:
        return sum(w.total_minutes for w in self.weeks)
