from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...settings.model import CompanySettings
from ...shifts.model import Shift
from ..model import ShiftTotals


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def shift_totals(self, shift: Shift, settings: CompanySettings, *, now: Optional[datetime] = None) -> ShiftTotals:
        raise NotImplementedError

    def worked_minutes(self, shift: Shift, settings: CompanySettings, *, now: Optional[datetime] = None) -> float:
        return self.shift_totals(shift, settings, now=now).worked_minutes
