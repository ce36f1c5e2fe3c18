"""Map stored shift documents to domain records.

Documents arrive in the camelCase shape the clients write (``clockIn``,
``travelSegments``, ``durationMinutes`` ...), with timestamps in whatever
form the store hands back. Everything is normalized here so the calculators
only ever see plain local datetimes.
"""
from __future__ import annotations

from datetime import tzinfo
from typing import Any, Mapping, Optional

from ..breaks.model import Break, TravelSegment
from ..common.datetime_utils import to_local
from ..common.formatting import round_half_up
from ..core.exceptions import ValidationError
from .model import JobLog, Shift


def _minutes(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return round_half_up(float(value))
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"Invalid durationMinutes: {value!r}") from exc


def break_from_document(doc: Mapping[str, Any], tz: Optional[tzinfo] = None) -> Break:
    return Break(
        start_time=to_local(doc.get("startTime"), tz),
        end_time=to_local(doc.get("endTime"), tz),
        duration_minutes=_minutes(doc.get("durationMinutes")),
        manual_entry=bool(doc.get("manualEntry", False)),
    )


def travel_from_document(doc: Mapping[str, Any], tz: Optional[tzinfo] = None) -> TravelSegment:
    return TravelSegment(
        start_time=to_local(doc.get("startTime"), tz),
        end_time=to_local(doc.get("endTime"), tz),
        duration_minutes=_minutes(doc.get("durationMinutes")),
    )


def job_log_from_document(doc: Optional[Mapping[str, Any]]) -> JobLog:
    doc = doc or {}
    return JobLog(
        field1=str(doc.get("field1") or ""),
        field2=str(doc.get("field2") or ""),
        field3=str(doc.get("field3") or ""),
        notes=str(doc.get("notes") or ""),
    )


def shift_from_document(shift_id: str, doc: Mapping[str, Any], tz: Optional[tzinfo] = None) -> Shift:
    clock_in = to_local(doc.get("clockIn"), tz)
    if clock_in is None:
        raise ValidationError(f"Shift {shift_id} has no clockIn")

    return Shift(
        shift_id=str(shift_id),
        user_id=str(doc.get("userId") or ""),
        user_email=doc.get("userEmail"),
        clock_in=clock_in,
        clock_out=to_local(doc.get("clockOut"), tz),
        breaks=tuple(break_from_document(b, tz) for b in doc.get("breaks") or ()),
        travel_segments=tuple(travel_from_document(t, tz) for t in doc.get("travelSegments") or ()),
        job_log=job_log_from_document(doc.get("jobLog")),
        manual_entry=bool(doc.get("manualEntry", False)),
        finalized=bool(doc.get("finalized", False)),
    )
