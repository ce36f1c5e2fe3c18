"""Example: build a timesheet report from shift documents (no UI, no store)."""

from datetime import date, datetime

from src.timetrack_nz.timetrack_nz.common.formatting import fmt_duration, fmt_week_ending
from src.timetrack_nz.timetrack_nz.main import bootstrap
from src.timetrack_nz.timetrack_nz.shifts.memory_shift_repository import InMemoryShiftRepository

DOCUMENTS = {
    "s1": {
        "userId": "u1",
        "userEmail": "aroha@example.co.nz",
        "clockIn": datetime(2025, 2, 3, 8, 0),
        "clockOut": datetime(2025, 2, 3, 16, 30),
        "breaks": [{"startTime": datetime(2025, 2, 3, 12, 0), "endTime": datetime(2025, 2, 3, 12, 0), "durationMinutes": 30, "manualEntry": True}],
        "travelSegments": [{"startTime": datetime(2025, 2, 3, 9, 0), "endTime": datetime(2025, 2, 3, 9, 15), "durationMinutes": 15}],
        "jobLog": {"field1": "Fit-out, level 2"},
    },
}


def main():
    repo = InMemoryShiftRepository.from_documents(DOCUMENTS)
    container = bootstrap(repo)

    for emp in container.timesheet_service.list_for_range(start=date(2025, 2, 1), end=date(2025, 2, 28)):
        for week in emp.weeks:
            print(emp.name, fmt_week_ending(week.week_end), fmt_duration(week.total_minutes))

    report = container.payroll_report_service.build_timesheet_report(start=date(2025, 2, 1), end=date(2025, 2, 28))
    print(report.to_frame())


if __name__ == "__main__":
    main()
