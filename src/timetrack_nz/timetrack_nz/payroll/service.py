from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional

import pandas as pd

from ..common.formatting import fmt_duration, fmt_hhmm
from ..shifts.model import get_job_log_field
from ..timesheets.service import TimesheetService
from .model import ShiftTotals

logger = logging.getLogger(__name__)

ROW_COLUMNS = [
    "user_id",
    "employee",
    "work_date",
    "week_ending",
    "clock_in",
    "clock_out",
    "shift_minutes",
    "paid_break_minutes",
    "unpaid_break_minutes",
    "untaken_paid_minutes",
    "worked_minutes",
    "travel_minutes",
    "worked",
    "travel",
    "notes",
    "manual_entry",
    "finalized",
]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]

    def to_frame(self) -> pd.DataFrame:
        """Rows as a DataFrame, column order fixed for CSV/PDF exporters."""
        return pd.DataFrame(self.rows, columns=ROW_COLUMNS)

    def summary_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.summary)


class PayrollReportService:
    def __init__(self, timesheets: TimesheetService):
        self._timesheets = timesheets

    def build_timesheet_report(
        self,
        *,
        start: date,
        end: date,
        user_id: Optional[str] = None,
        names: Optional[Mapping[str, str]] = None,
        now: Optional[datetime] = None,
    ) -> ReportData:
        employees = self._timesheets.list_for_range(start=start, end=end, user_id=user_id, names=names, now=now)

        out_rows: list[dict] = []
        summary: list[dict] = []
        for emp in employees:
            for week in emp.weeks:
                for t in sorted(week.shifts, key=lambda x: x.shift.clock_in):
                    out_rows.append(self._row(emp.name, week.key, t))

                summary.append(
                    {
                        "user_id": emp.user_id,
                        "employee": emp.name,
                        "week_ending": week.key,
                        "shifts": len(week.shifts),
                        "worked_minutes": round(week.total_minutes, 2),
                        "travel_minutes": week.travel_minutes,
                        "payable_minutes": round(week.payable_minutes, 2),
                        "worked_hours": fmt_hhmm(week.total_minutes),
                        "finalized": week.finalized,
                    }
                )

        out_rows.sort(key=lambda r: (r["work_date"], r["clock_in"], r["employee"]))
        summary.sort(key=lambda s: (s["week_ending"], s["employee"]))
        logger.info("Timesheet report %s..%s: %s rows, %s week summaries", start, end, len(out_rows), len(summary))
        return ReportData(rows=out_rows, summary=summary)

    @staticmethod
    def _row(employee: str, week_key: str, t: ShiftTotals) -> dict:
        sh = t.shift
        return {
            "user_id": sh.user_id,
            "employee": employee,
            "work_date": sh.clock_in.strftime("%Y-%m-%d"),
            "week_ending": week_key,
            "clock_in": sh.clock_in.strftime("%H:%M"),
            "clock_out": sh.clock_out.strftime("%H:%M") if sh.clock_out else "-",
            "shift_minutes": round(t.shift_minutes, 2),
            "paid_break_minutes": t.allocation.paid,
            "unpaid_break_minutes": t.allocation.unpaid,
            "untaken_paid_minutes": t.untaken_paid_minutes,
            "worked_minutes": round(t.worked_minutes, 2),
            "travel_minutes": t.travel_minutes,
            "worked": fmt_duration(t.worked_minutes),
            "travel": fmt_duration(t.travel_minutes),
            "notes": get_job_log_field(sh.job_log, "field1"),
            "manual_entry": sh.manual_entry,
            "finalized": sh.finalized,
        }
