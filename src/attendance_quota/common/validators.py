from __future__ import annotations

import math
from typing import Any

from ..core.constants import MAX_PERCENTAGE, MIN_PERCENTAGE
from ..core.exceptions import ValidationError


def clamp_percentage(value: float) -> float:
    """Clamp a percentage into [0, 100]."""
    return min(max(float(value), MIN_PERCENTAGE), MAX_PERCENTAGE)


def non_negative_int(value: int) -> int:
    return max(int(value), 0)


def parse_int_or_zero(value: Any, field_name: str) -> int:
    """Parse a lecture count: blanks become 0 and negatives clamp to 0.

    Fractions are truncated whether they arrive as numbers or strings
    (3.5 and "3.5" both give 3). Booleans and non-numeric strings are
    rejected rather than guessed.
    """
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, str):
        text = value.strip()
        try:
            return non_negative_int(int(text, 10))
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            raise ValidationError(f"{field_name} must be a whole number") from None
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"{field_name} must be a whole number")
        return non_negative_int(value)
    if isinstance(value, int):
        return non_negative_int(value)
    raise ValidationError(f"{field_name} must be a whole number")


def parse_percentage(value: Any, field_name: str) -> float:
    """Parse a typed percentage and clamp it into [0, 100]."""
    if isinstance(value, bool) or value is None or value == "":
        raise ValidationError(f"{field_name} must be a number")
    try:
        parsed = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if math.isnan(parsed):
        raise ValidationError(f"{field_name} must be a number")
    return clamp_percentage(parsed)


def require_positive(value: int, field_name: str) -> int:
    if value is None or isinstance(value, bool) or int(value) <= 0:
        raise ValidationError(f"{field_name} must be a positive whole number")
    return int(value)


def require_mapping(value: Any, field_name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"{field_name} must be an object")
    return value
