from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Optional

from ..core.enums import RoundDirection
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeComponents:
    hour: str
    minute: str
    ampm: str


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_local(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Normalize a stored timestamp to a naive local wall-clock datetime.

    Accepts datetimes, dates, ISO strings, epoch milliseconds and timestamp
    wrappers exposing ``to_datetime()``/``ToDatetime()``/``toDate()``. Aware
    values are converted to ``tz`` (or the process local zone) before the
    tzinfo is dropped, so week grouping sees the employee's calendar day.
    """
    if value is None:
        return None

    for attr in ("to_datetime", "ToDatetime", "toDate"):
        convert = getattr(value, attr, None)
        if callable(convert) and not isinstance(value, datetime):
            return to_local(convert(), tz)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value
        return value.astimezone(tz).replace(tzinfo=None)

    if isinstance(value, date):
        return datetime.combine(value, time())

    if isinstance(value, bool):
        raise ValidationError(f"Unsupported timestamp value: {value!r}")

    if isinstance(value, (int, float)):
        if tz is None:
            return datetime.fromtimestamp(value / 1000)
        return datetime.fromtimestamp(value / 1000, tz).replace(tzinfo=None)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid timestamp: {value!r}") from exc
        return to_local(parsed, tz)

    raise ValidationError(f"Unsupported timestamp value: {value!r}")


def js_weekday(value: date) -> int:
    """Weekday numbered 0=Sunday..6=Saturday."""
    return (value.weekday() + 1) % 7


def get_hours(start: Optional[datetime], end: Optional[datetime] = None, *, now: Optional[datetime] = None) -> float:
    """Fractional hours between two times.

    A missing ``end`` means the shift is still open; it is measured against
    ``now`` (current local time by default).
    """
    if start is None:
        return 0.0
    finish = end if end is not None else (now or now_local())
    return (finish - start).total_seconds() / 3600


def time_components(value: datetime) -> TimeComponents:
    hours = value.hour % 12 or 12
    return TimeComponents(
        hour=str(hours),
        minute=f"{value.minute:02d}",
        ampm="PM" if value.hour >= 12 else "AM",
    )


def round_time(value: datetime, round_to: int, direction: RoundDirection | str) -> datetime:
    """Round to a 15 or 30 minute boundary; rounding up past :45/:30 rolls the hour."""
    if round_to not in (15, 30):
        raise ValidationError("round_to must be 15 or 30")

    direction = RoundDirection(direction)
    result = value.replace(second=0, microsecond=0)
    if direction == RoundDirection.DOWN:
        minutes = (value.minute // round_to) * round_to
        return result.replace(minute=minutes)

    minutes = math.ceil(value.minute / round_to) * round_to
    if minutes == 60:
        return result.replace(minute=0) + timedelta(hours=1)
    return result.replace(minute=minutes)


def build_datetime_from_time(base: date, hour: str, minute: str, ampm: str) -> datetime:
    """Combine a calendar day with a 12-hour clock picker value."""
    h = int(hour)
    ampm = ampm.upper()
    if ampm == "PM" and h != 12:
        h += 12
    if ampm == "AM" and h == 12:
        h = 0
    day = base.date() if isinstance(base, datetime) else base
    return datetime.combine(day, time(h, int(minute)))
