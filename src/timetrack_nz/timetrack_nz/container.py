from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.entitlement_calculator import EntitlementPayrollCalculator
from .payroll.service import PayrollReportService
from .settings.model import CompanySettings
from .shifts.memory_shift_repository import InMemoryShiftRepository
from .shifts.repository import ShiftRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    settings: CompanySettings

    shifts_repo: ShiftRepository
    calculator: PayrollCalculator

    timesheet_service: TimesheetService
    payroll_report_service: PayrollReportService


def build_container(
    *,
    shifts_repo: ShiftRepository,
    settings: CompanySettings,
    calculator: Optional[PayrollCalculator] = None,
) -> Container:
    if isinstance(shifts_repo, InMemoryShiftRepository):
        # Week grouping reads wall-clock dates, which must be the company's.
        shifts_repo = shifts_repo.with_timezone(settings.tz)

    calculator = calculator or EntitlementPayrollCalculator()
    timesheet_service = TimesheetService(shifts_repo, settings, calculator=calculator)
    payroll_report_service = PayrollReportService(timesheet_service)

    return Container(
        settings=settings,
        shifts_repo=shifts_repo,
        calculator=calculator,
        timesheet_service=timesheet_service,
        payroll_report_service=payroll_report_service,
    )
