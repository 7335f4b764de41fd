from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not isinstance(value, (str, int)) or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str) -> int:
    """Accept ints and numeric strings; reject bools, zero and negatives."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid id")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid id")
    if number <= 0:
        raise ValidationError(f"{field_name} is not a valid id")
    return number
