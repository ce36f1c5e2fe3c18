from __future__ import annotations

from datetime import date, datetime

from src.timetrack_nz.timetrack_nz.container import build_container
from src.timetrack_nz.timetrack_nz.main import bootstrap
from src.timetrack_nz.timetrack_nz.payroll.service import ROW_COLUMNS, PayrollReportService
from src.timetrack_nz.timetrack_nz.settings.model import CompanySettings
from src.timetrack_nz.timetrack_nz.shifts.memory_shift_repository import InMemoryShiftRepository
from src.timetrack_nz.timetrack_nz.timesheets.service import TimesheetService

from shift_builders import make_shift


class FakeShiftRepo:
    def __init__(self, shifts):
        self._shifts = shifts
        self.last_args = None

    def list_for_range(self, *, start_date: date, end_date: date, user_id=None):
        self.last_args = {
            "start_date": start_date,
            "end_date": end_date,
            "user_id": user_id,
        }
        return self._shifts


def _service(shifts, settings=None):
    repo = FakeShiftRepo(shifts)
    return PayrollReportService(TimesheetService(repo, settings or CompanySettings())), repo


def test_report_rows_and_week_summary():
    shifts = [
        make_shift("s1", datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 16, 30), breaks=[30], travel=[15], notes="Fit-out"),
        make_shift("s2", datetime(2025, 2, 4, 8, 0), datetime(2025, 2, 4, 16, 0)),
    ]
    svc, _ = _service(shifts)

    report = svc.build_timesheet_report(start=date(2025, 2, 3), end=date(2025, 2, 9))

    first = report.rows[0]
    assert first["work_date"] == "2025-02-03"
    assert first["week_ending"] == "2025-02-09"
    assert first["clock_in"] == "08:00"
    assert first["clock_out"] == "16:30"
    assert first["paid_break_minutes"] == 20
    assert first["unpaid_break_minutes"] == 10
    assert first["worked_minutes"] == 500
    assert first["worked"] == "8h 20m"
    assert first["travel"] == "15m"
    assert first["notes"] == "Fit-out"

    assert report.rows[1]["untaken_paid_minutes"] == 20
    assert report.rows[1]["worked_minutes"] == 500

    assert len(report.summary) == 1
    summary = report.summary[0]
    assert summary["worked_minutes"] == 1000
    assert summary["travel_minutes"] == 15
    assert summary["payable_minutes"] == 1015
    assert summary["worked_hours"] == "16:40"
    assert summary["shifts"] == 2


def test_open_shift_row(fixed_now):
    svc, _ = _service([make_shift("s1", datetime(2025, 2, 3, 13, 0), None)])

    report = svc.build_timesheet_report(start=date(2025, 2, 3), end=date(2025, 2, 3), now=fixed_now)

    assert report.rows[0]["clock_out"] == "-"
    assert report.rows[0]["worked_minutes"] == 250


def test_report_forwards_user_id_filter():
    svc, repo = _service([])

    report = svc.build_timesheet_report(start=date(2026, 1, 1), end=date(2026, 1, 31), user_id="u123")

    assert repo.last_args["user_id"] == "u123"
    assert report.rows == []
    assert list(report.to_frame().columns) == ROW_COLUMNS


def test_to_frame_has_one_row_per_shift():
    shifts = [
        make_shift("s1", datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 16, 30)),
        make_shift("s2", datetime(2025, 2, 3, 9, 0), datetime(2025, 2, 3, 12, 0), user_id="u2", email="ben@example.co.nz"),
    ]
    svc, _ = _service(shifts)

    frame = svc.build_timesheet_report(start=date(2025, 2, 3), end=date(2025, 2, 3)).to_frame()

    assert len(frame) == 2
    assert frame["employee"].tolist() == ["aroha@example.co.nz", "ben@example.co.nz"]


def test_container_wires_services():
    repo = InMemoryShiftRepository([make_shift("s1", datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 16, 30), breaks=[30])])
    container = build_container(shifts_repo=repo, settings=CompanySettings())

    report = container.payroll_report_service.build_timesheet_report(start=date(2025, 2, 1), end=date(2025, 2, 28))

    assert report.rows[0]["worked_minutes"] == 500


def test_bootstrap_uses_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    container = bootstrap(InMemoryShiftRepository(), company_overrides={"payWeekEndDay": 6})

    assert container.settings.pay_week_end_day == 6
    assert container.timesheet_service.settings is container.settings


def test_summary_frame_has_one_row_per_employee_week():
    shifts = [
        make_shift("s1", datetime(2025, 2, 3, 8, 0), datetime(2025, 2, 3, 16, 30)),
        make_shift("s2", datetime(2025, 2, 10, 8, 0), datetime(2025, 2, 10, 16, 0)),
    ]
    svc, _ = _service(shifts)

    frame = svc.build_timesheet_report(start=date(2025, 2, 1), end=date(2025, 2, 28)).summary_frame()

    assert frame["week_ending"].tolist() == ["2025-02-09", "2025-02-16"]
    assert frame["worked_minutes"].tolist() == [530.0, 500.0]


def test_pipeline_groups_by_company_zone_on_utc_host(utc_host, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    # 00:30 Monday 10 Feb in Auckland, still Sunday in UTC.
    repo = InMemoryShiftRepository.from_documents(
        {"s1": {"userId": "u1", "clockIn": "2025-02-09T11:30:00Z", "clockOut": "2025-02-09T19:30:00Z"}}
    )

    container = bootstrap(repo)
    employees = container.timesheet_service.list_for_range(start=date(2025, 2, 1), end=date(2025, 2, 28))

    assert container.settings.timezone == "Pacific/Auckland"
    assert employees[0].weeks[0].key == "2025-02-16"
    assert employees[0].weeks[0].shifts[0].shift.clock_in == datetime(2025, 2, 10, 0, 30)


def test_bootstrap_loads_settings_module_once(monkeypatch):
    from src.timetrack_nz.timetrack_nz import main as main_module
    from src.timetrack_nz.timetrack_nz.settings import loader as loader_module

    monkeypatch.setenv("APP_ENV", "testing")
    calls = []
    real_load = loader_module.load_settings_module

    def counting_load():
        calls.append(1)
        return real_load()

    monkeypatch.setattr(main_module, "load_settings_module", counting_load)
    monkeypatch.setattr(loader_module, "load_settings_module", counting_load)

    bootstrap(InMemoryShiftRepository())

    assert len(calls) == 1
