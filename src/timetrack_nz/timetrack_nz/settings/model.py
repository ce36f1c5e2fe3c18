from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.validators import require_in_range, require_non_empty
from ..core.constants import (
    DEFAULT_FIELD1_LABEL,
    DEFAULT_FIELD2_LABEL,
    DEFAULT_FIELD3_LABEL,
    DEFAULT_MANAGER_DISPLAY_NAME,
    DEFAULT_PAID_REST_MINUTES,
    DEFAULT_PAY_WEEK_END_DAY,
    DEFAULT_TIMEZONE,
    MAX_PAID_REST_MINUTES,
    MIN_PAID_REST_MINUTES,
)
from ..core.exceptions import ValidationError

# Stored documents use camelCase keys.
_ALIASES = {
    "paidRestMinutes": "paid_rest_minutes",
    "payWeekEndDay": "pay_week_end_day",
    "field1Label": "field1_label",
    "field2Label": "field2_label",
    "field3Label": "field3_label",
    "managerDisplayName": "manager_display_name",
}


@dataclass(frozen=True)
class CompanySettings:
    """Per-company configuration consumed by the calculators.

    Values are checked once here; the calculation functions assume a valid
    rest length and pay-week day.
    """

    paid_rest_minutes: int = DEFAULT_PAID_REST_MINUTES
    pay_week_end_day: int = DEFAULT_PAY_WEEK_END_DAY
    field1_label: str = DEFAULT_FIELD1_LABEL
    field2_label: str = DEFAULT_FIELD2_LABEL
    field3_label: str = DEFAULT_FIELD3_LABEL
    manager_display_name: str = DEFAULT_MANAGER_DISPLAY_NAME
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self):
        object.__setattr__(
            self,
            "paid_rest_minutes",
            require_in_range(self.paid_rest_minutes, "paid_rest_minutes", MIN_PAID_REST_MINUTES, MAX_PAID_REST_MINUTES),
        )
        object.__setattr__(self, "pay_week_end_day", require_in_range(self.pay_week_end_day, "pay_week_end_day", 0, 6))
        object.__setattr__(self, "timezone", require_non_empty(self.timezone, "timezone"))
        self.tz  # fail fast on unknown zone names

    @property
    def tz(self) -> tzinfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValidationError(f"Unknown timezone: {self.timezone}") from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CompanySettings":
        """Build from a settings document (camelCase or snake_case keys); missing keys keep defaults."""
        fields = set(cls.__dataclass_fields__)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name in fields and value is not None:
                kwargs[name] = value
        return cls(**kwargs)
