from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Break:
    """A rest or meal pause within a shift.

    Manually added breaks carry ``start_time == end_time`` and a fixed
    ``duration_minutes``; ``manual_entry`` only drives labelling.
    """

    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    manual_entry: bool = False

    @property
    def is_active(self) -> bool:
        return self.end_time is None


@dataclass(frozen=True)
class TravelSegment:
    """Time spent travelling between job sites during a shift."""

    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.end_time is None


@dataclass(frozen=True)
class BreakEntitlement:
    """Statutory break allowance for one shift length."""

    paid_breaks: int
    meal_breaks: int
    paid_minutes: int
    unpaid_minutes: int


@dataclass(frozen=True)
class BreakAllocation:
    """Recorded break minutes split into paid and unpaid portions."""

    paid: int
    unpaid: int
    total: int


@dataclass(frozen=True)
class BreakRule:
    """One row of the break rules info panel."""

    hours: str
    paid_rest: str
    unpaid_meal: str
