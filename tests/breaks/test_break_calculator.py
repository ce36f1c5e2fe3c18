import pytest

from src.timetrack_nz.timetrack_nz.breaks.calculator import (
    calc_breaks,
    calc_travel,
    total_break_minutes,
    untaken_paid_minutes,
)
from src.timetrack_nz.timetrack_nz.breaks.entitlements import get_break_entitlements
from src.timetrack_nz.timetrack_nz.breaks.model import BreakAllocation

from shift_builders import make_break, make_travel


@pytest.mark.parametrize("hours", [0, 3, 8, 16])
def test_no_breaks_is_all_zero(hours):
    assert calc_breaks([], hours, 10) == BreakAllocation(paid=0, unpaid=0, total=0)


def test_manual_thirty_minute_break_on_eight_and_a_half_hours():
    alloc = calc_breaks([make_break(30)], 8.5, 10)
    assert alloc == BreakAllocation(paid=20, unpaid=10, total=30)


def test_split_applies_to_aggregate_not_each_break():
    alloc = calc_breaks([make_break(10), make_break(10), make_break(10)], 8, 10)
    assert alloc == BreakAllocation(paid=20, unpaid=10, total=30)


def test_manual_and_timed_breaks_count_the_same():
    manual = calc_breaks([make_break(15, manual=True)], 5, 10)
    timed = calc_breaks([make_break(15, manual=False)], 5, 10)
    assert manual == timed


def test_missing_duration_counts_as_zero():
    alloc = calc_breaks([make_break(None), make_break(5)], 1, 10)
    assert alloc == BreakAllocation(paid=0, unpaid=5, total=5)


def test_none_breaks_treated_as_empty():
    assert total_break_minutes(None) == 0
    assert calc_breaks(None, 8).total == 0


@pytest.mark.parametrize("hours", [1, 3, 8.5, 12, 18])
def test_paid_plus_unpaid_equals_total(hours):
    breaks = [make_break(m) for m in (7, 23, 41)]
    alloc = calc_breaks(breaks, hours, 15)
    assert alloc.paid + alloc.unpaid == alloc.total == 71


def test_more_break_time_never_reduces_paid_or_unpaid():
    ent = get_break_entitlements(9, 10)
    previous = calc_breaks([], 9, 10)
    for minutes in range(0, 120, 5):
        alloc = calc_breaks([make_break(minutes)], 9, 10)
        assert alloc.unpaid >= previous.unpaid
        assert alloc.paid >= previous.paid
        assert alloc.paid <= ent.paid_minutes
        previous = alloc


def test_calc_travel_sums_segments():
    assert calc_travel([]) == 0
    assert calc_travel(None) == 0
    assert calc_travel([make_travel(15), make_travel(None), make_travel(20)]) == 35


def test_calc_travel_is_order_independent():
    segments = [make_travel(m) for m in (5, 12, 30)]
    assert calc_travel(segments) == calc_travel(list(reversed(segments))) == 47


def test_untaken_paid_minutes():
    ent = get_break_entitlements(8, 10)
    assert untaken_paid_minutes(ent, calc_breaks([], 8, 10)) == 20
    assert untaken_paid_minutes(ent, calc_breaks([make_break(10)], 8, 10)) == 10
    assert untaken_paid_minutes(ent, calc_breaks([make_break(45)], 8, 10)) == 0
