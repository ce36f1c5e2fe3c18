"""TimeTrack NZ calculation core.

This package is organized by feature modules (breaks, shifts, payroll,
timesheets, ...) with pure calculation functions at the bottom and thin
service/repository layers on top.
"""
