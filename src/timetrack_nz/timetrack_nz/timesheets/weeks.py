"""Pay-week grouping.

A pay week closes on a configured weekday (0=Sunday..6=Saturday). Dates are
taken from the wall-clock components of the value passed in, never from a
UTC-normalized instant, so a shift started just after local midnight stays in
its own week.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

from ..common.datetime_utils import js_weekday

DateLike = Union[date, datetime]

END_OF_DAY = time(23, 59, 59, 999000)


def _calendar_day(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def get_week_ending_day(shift_date: DateLike, pay_week_end_day: int) -> date:
    day = _calendar_day(shift_date)
    days_until_end = (pay_week_end_day - js_weekday(day)) % 7
    return day + timedelta(days=days_until_end)


def get_week_ending_date(shift_date: DateLike, pay_week_end_day: int) -> datetime:
    """Last moment (23:59:59.999) of the pay week containing ``shift_date``."""
    return datetime.combine(get_week_ending_day(shift_date, pay_week_end_day), END_OF_DAY)


def get_week_ending_key(shift_date: DateLike, pay_week_end_day: int) -> str:
    """``YYYY-MM-DD`` of the week-ending day; sorts chronologically as a string."""
    return get_week_ending_day(shift_date, pay_week_end_day).isoformat()


def week_bounds(shift_date: DateLike, pay_week_end_day: int) -> tuple[date, date]:
    end = get_week_ending_day(shift_date, pay_week_end_day)
    return end - timedelta(days=6), end
