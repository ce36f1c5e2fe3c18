from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ...breaks.calculator import calc_breaks, calc_travel, untaken_paid_minutes
from ...breaks.entitlements import get_break_entitlements
from ...common.datetime_utils import get_hours, now_local
from ...settings.model import CompanySettings
from ...shifts.model import Shift
from ..model import ShiftTotals
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class EntitlementPayrollCalculator(PayrollCalculator):
    """Rule: shift - unpaid breaks + untaken paid rest entitlement, not below 0.

    Paid rest entitlement the employee did not take is paid out as worked
    time. Travel minutes are carried separately.
    """

    def shift_totals(self, shift: Shift, settings: CompanySettings, *, now: Optional[datetime] = None) -> ShiftTotals:
        if shift.is_open:
            now = now or now_local()
            logger.debug("Shift %s is open, measuring to %s", shift.shift_id, now)

        hours = max(0.0, get_hours(shift.clock_in, shift.clock_out, now=now))
        entitlement = get_break_entitlements(hours, settings.paid_rest_minutes)
        allocation = calc_breaks(shift.breaks, hours, settings.paid_rest_minutes)
        untaken = untaken_paid_minutes(entitlement, allocation)

        shift_minutes = hours * 60
        return ShiftTotals(
            shift=shift,
            hours=hours,
            shift_minutes=shift_minutes,
            entitlement=entitlement,
            allocation=allocation,
            untaken_paid_minutes=untaken,
            worked_minutes=max(0.0, shift_minutes - allocation.unpaid + untaken),
            travel_minutes=calc_travel(shift.travel_segments),
        )
