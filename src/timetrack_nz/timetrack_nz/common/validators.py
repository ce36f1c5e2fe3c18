from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a whole number") from exc
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} must be a whole number")
    return number


def require_in_range(value: Any, field_name: str, low: int, high: int) -> int:
    number = require_int(value, field_name)
    if not low <= number <= high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()
