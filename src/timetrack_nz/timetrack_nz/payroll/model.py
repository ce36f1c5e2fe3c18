from __future__ import annotations

from dataclasses import dataclass

from ..breaks.model import BreakAllocation, BreakEntitlement
from ..shifts.model import Shift


@dataclass(frozen=True)
class ShiftTotals:
    """Per-shift payroll figures, all durations in minutes."""

    shift: Shift
    hours: float
    shift_minutes: float
    entitlement: BreakEntitlement
    allocation: BreakAllocation
    untaken_paid_minutes: int
    worked_minutes: float
    travel_minutes: int

    @property
    def payable_minutes(self) -> float:
        # Travel is paid on top of worked time, never blended into it.
        return self.worked_minutes + self.travel_minutes

    @property
    def is_open(self) -> bool:
        return self.shift.is_open
