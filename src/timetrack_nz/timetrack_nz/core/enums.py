from __future__ import annotations

from enum import Enum


class ShiftStatus(str, Enum):
    """Lifecycle state of a shift as stored by the clock apps."""

    ACTIVE = "active"
    COMPLETED = "completed"


class RoundDirection(str, Enum):
    DOWN = "down"
    UP = "up"
