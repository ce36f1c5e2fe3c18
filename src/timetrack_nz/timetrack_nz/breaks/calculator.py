"""Aggregate recorded break and travel time for a shift.

Break type is not tracked per break, so the split is applied to the total:
the first minutes up to the paid entitlement are paid, everything beyond is
unpaid. Travel is never split and is reported as its own figure.
"""
from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import DEFAULT_PAID_REST_MINUTES
from .entitlements import get_break_entitlements
from .model import Break, BreakAllocation, BreakEntitlement, TravelSegment


def total_break_minutes(breaks: Optional[Iterable[Break]]) -> int:
    return sum(b.duration_minutes or 0 for b in (breaks or ()))


def calc_breaks(
    breaks: Optional[Iterable[Break]],
    hours: float,
    paid_rest_minutes: int = DEFAULT_PAID_REST_MINUTES,
) -> BreakAllocation:
    total = total_break_minutes(breaks)
    entitlement = get_break_entitlements(hours, paid_rest_minutes)
    paid = min(total, entitlement.paid_minutes)
    return BreakAllocation(paid=paid, unpaid=max(0, total - paid), total=total)


def calc_travel(travel_segments: Optional[Iterable[TravelSegment]]) -> int:
    return sum(t.duration_minutes or 0 for t in (travel_segments or ()))


def untaken_paid_minutes(entitlement: BreakEntitlement, allocation: BreakAllocation) -> int:
    """Paid rest entitlement the employee did not use; credited as worked time."""
    return max(0, entitlement.paid_minutes - allocation.paid)
