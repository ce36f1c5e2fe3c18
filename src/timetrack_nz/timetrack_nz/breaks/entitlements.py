"""NZ rest and meal break entitlements (Employment Relations Act 2000, s69ZD).

One canonical table is used everywhere. Up to 16 hours the entitlement is a
step function of shift length; from 16 hours on it repeats every 8 hours,
with the remainder of the last cycle earning a partial allowance.
"""
from __future__ import annotations

from ..core.constants import (
    DEFAULT_PAID_REST_MINUTES,
    ENTITLEMENT_CYCLE_HOURS,
    ENTITLEMENT_CYCLE_START_HOURS,
    UNPAID_MEAL_MINUTES,
)
from .model import BreakEntitlement, BreakRule

# (minimum hours, paid rest breaks, unpaid meal breaks), longest first.
_BANDS: tuple[tuple[int, int, int], ...] = (
    (14, 4, 2),
    (12, 3, 2),
    (10, 3, 1),
    (6, 2, 1),
    (4, 1, 1),
    (2, 1, 0),
)


def _band_counts(hours: float) -> tuple[int, int]:
    for min_hours, paid, meal in _BANDS:
        if hours >= min_hours:
            return paid, meal
    return 0, 0


def _remainder_counts(remainder: float) -> tuple[int, int]:
    if remainder >= 6:
        return 2, 1
    if remainder >= 4:
        return 1, 1
    if remainder >= 2:
        return 1, 0
    return 0, 0


def break_counts(hours_worked: float) -> tuple[int, int]:
    """Number of (paid rest, unpaid meal) breaks owed for a shift length.

    Negative lengths count as zero.
    """
    hours = max(0.0, float(hours_worked))
    if hours < ENTITLEMENT_CYCLE_START_HOURS:
        return _band_counts(hours)

    cycles = int(hours // ENTITLEMENT_CYCLE_HOURS)
    extra_paid, extra_meal = _remainder_counts(hours % ENTITLEMENT_CYCLE_HOURS)
    return cycles * 2 + extra_paid, cycles + extra_meal


def get_break_entitlements(
    hours_worked: float,
    paid_rest_minutes: int = DEFAULT_PAID_REST_MINUTES,
) -> BreakEntitlement:
    paid, meal = break_counts(hours_worked)
    return BreakEntitlement(
        paid_breaks=paid,
        meal_breaks=meal,
        paid_minutes=paid * paid_rest_minutes,
        unpaid_minutes=meal * UNPAID_MEAL_MINUTES,
    )


def break_rules_table(paid_rest_minutes: int = DEFAULT_PAID_REST_MINUTES) -> list[BreakRule]:
    """Rows for the "NZ break rules" info panel, shortest shift band first."""

    def paid_text(count: int, suffix: str = "") -> str:
        return f"{count} × {paid_rest_minutes}min{suffix}" if count else "—"

    def meal_text(count: int, suffix: str = "") -> str:
        return f"{count} × {UNPAID_MEAL_MINUTES}min{suffix}" if count else "—"

    rows: list[BreakRule] = []
    upper = ENTITLEMENT_CYCLE_START_HOURS
    for min_hours, paid, meal in _BANDS:
        rows.append(BreakRule(hours=f"{min_hours}-{upper}h", paid_rest=paid_text(paid), unpaid_meal=meal_text(meal)))
        upper = min_hours
    rows.reverse()

    per_cycle = f" per {ENTITLEMENT_CYCLE_HOURS}h"
    rows.append(
        BreakRule(
            hours=f"{ENTITLEMENT_CYCLE_START_HOURS}h+",
            paid_rest=paid_text(2, per_cycle),
            unpaid_meal=meal_text(1, per_cycle),
        )
    )
    return rows
