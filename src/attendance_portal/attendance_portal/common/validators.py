from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_digits(value: Optional[str], field_name: str, length: int) -> str:
    value = (value or "").strip()
    if len(value) != length or not value.isdigit():
        raise ValidationError(f"{field_name} must be exactly {length} digits")
    return value


def require_int(value, field_name: str) -> int:
    parsed = optional_int(value)
    if parsed is None:
        raise ValidationError(f"{field_name} is required")
    return parsed


def optional_int(value) -> Optional[int]:
    """Parse a form/query id; blank means "not selected"."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    value = str(value).strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid identifier: {value}")
