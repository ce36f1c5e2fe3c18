from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Iterable, Mapping, Optional

from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.entitlement_calculator import EntitlementPayrollCalculator
from ..payroll.model import ShiftTotals
from ..settings.model import CompanySettings
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .model import EmployeeTimesheet, TimesheetWeek
from .weeks import get_week_ending_date, get_week_ending_key

logger = logging.getLogger(__name__)


class TimesheetService:
    """Buckets shifts per employee and pay week for the dashboard timesheets."""

    def __init__(
        self,
        shifts: ShiftRepository,
        settings: CompanySettings,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._shifts = shifts
        self._settings = settings
        self._calculator = calculator or EntitlementPayrollCalculator()

    @property
    def settings(self) -> CompanySettings:
        return self._settings

    def shift_totals(self, shift: Shift, *, now: Optional[datetime] = None) -> ShiftTotals:
        return self._calculator.shift_totals(shift, self._settings, now=now)

    def group_shifts(
        self,
        shifts: Iterable[Shift],
        *,
        names: Optional[Mapping[str, str]] = None,
        now: Optional[datetime] = None,
    ) -> list[EmployeeTimesheet]:
        """Employees sorted by name; weeks and shifts newest first."""
        names = names or {}
        end_day = self._settings.pay_week_end_day

        by_user: dict[str, dict[str, list[ShiftTotals]]] = defaultdict(lambda: defaultdict(list))
        emails: dict[str, Optional[str]] = {}
        count = 0
        for shift in shifts:
            totals = self.shift_totals(shift, now=now)
            by_user[shift.user_id][get_week_ending_key(shift.clock_in, end_day)].append(totals)
            emails.setdefault(shift.user_id, shift.user_email)
            count += 1

        employees: list[EmployeeTimesheet] = []
        for user_id, weeks in by_user.items():
            email = emails.get(user_id)
            employees.append(
                EmployeeTimesheet(
                    user_id=user_id,
                    name=names.get(user_id) or email or user_id,
                    email=email,
                    weeks=tuple(self._build_week(key, items) for key, items in sorted(weeks.items(), reverse=True)),
                )
            )

        employees.sort(key=lambda e: e.name.lower())
        logger.info("Grouped %s shifts into %s employee timesheets", count, len(employees))
        return employees

    def _build_week(self, key: str, items: list[ShiftTotals]) -> TimesheetWeek:
        items = sorted(items, key=lambda t: t.shift.clock_in, reverse=True)
        return TimesheetWeek(
            key=key,
            week_end=get_week_ending_date(items[0].shift.clock_in, self._settings.pay_week_end_day),
            shifts=tuple(items),
            total_minutes=sum(t.worked_minutes for t in items),
            travel_minutes=sum(t.travel_minutes for t in items),
            finalized=all(t.shift.finalized for t in items),
        )

    def list_for_range(
        self,
        *,
        start: date,
        end: date,
        user_id: Optional[str] = None,
        names: Optional[Mapping[str, str]] = None,
        now: Optional[datetime] = None,
    ) -> list[EmployeeTimesheet]:
        shifts = self._shifts.list_for_range(start_date=start, end_date=end, user_id=user_id)
        return self.group_shifts(shifts, names=names, now=now)
