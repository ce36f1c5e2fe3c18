from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..breaks.model import Break, TravelSegment
from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class JobLog:
    field1: str = ""
    field2: str = ""
    field3: str = ""
    # Older documents stored the first field as "notes".
    notes: str = ""


@dataclass(frozen=True)
class Shift:
    """Domain entity: one clock-in to clock-out work period for one employee."""

    shift_id: str
    user_id: str
    clock_in: datetime
    clock_out: Optional[datetime] = None
    breaks: tuple[Break, ...] = ()
    travel_segments: tuple[TravelSegment, ...] = ()
    user_email: Optional[str] = None
    job_log: JobLog = field(default_factory=JobLog)
    manual_entry: bool = False
    finalized: bool = False

    @property
    def status(self) -> ShiftStatus:
        return ShiftStatus.ACTIVE if self.clock_out is None else ShiftStatus.COMPLETED

    @property
    def is_open(self) -> bool:
        return self.clock_out is None


def get_job_log_field(job_log: Optional[JobLog], name: str) -> str:
    if job_log is None:
        return ""
    if name == "field1":
        return job_log.field1 or job_log.notes or ""
    return getattr(job_log, name, "") or ""
