"""Display helpers shared by every view and export.

Dates are rendered the way the en-NZ clients render them; names come from
fixed tables so output does not depend on the process locale.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import WEEKDAY_NAMES
from .datetime_utils import js_weekday

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Nearest whole number, .5 rounding up (44.5 -> 45)."""
    return int(math.floor(value + 0.5))


def _whole_minutes(minutes: Number) -> int:
    return max(0, round_half_up(minutes))


def fmt_duration(minutes: Number) -> str:
    """125 -> '2h 5m', 120 -> '2h', 45 -> '45m'."""
    h, m = divmod(_whole_minutes(minutes), 60)
    if h == 0:
        return f"{m}m"
    if m == 0:
        return f"{h}h"
    return f"{h}h {m}m"


def fmt_hhmm(minutes: Number) -> str:
    """Zero-padded hours:minutes total, e.g. 510 -> '08:30'."""
    h, m = divmod(_whole_minutes(minutes), 60)
    return f"{h:02d}:{m:02d}"


def fmt_time(value: Optional[datetime]) -> str:
    if value is None:
        return "--:--"
    hours = value.hour % 12 or 12
    suffix = "pm" if value.hour >= 12 else "am"
    return f"{hours:02d}:{value.minute:02d} {suffix}"


def fmt_date(value: Optional[date]) -> str:
    """'Mon, 3 Feb 2025'."""
    if value is None:
        return "--"
    weekday = WEEKDAY_NAMES[js_weekday(value)][:3]
    return f"{weekday}, {value.day} {_MONTH_ABBR[value.month - 1]} {value.year}"


def fmt_date_short(value: Optional[date]) -> str:
    if value is None:
        return "--"
    return f"{value.day:02d}/{value.month:02d}/{value.year}"


def fmt_week_ending(value: date) -> str:
    return f"{value.day} {_MONTH_ABBR[value.month - 1]} {value.year}"


def weekday_name(day: int) -> str:
    return WEEKDAY_NAMES[day]
