"""Numeric coercion helpers.

Estimation never fails on bad numeric input: values that cannot be used are
replaced by a safe default so a (possibly degenerate) quotation is still
produced.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

__all__ = [
    "MAX_SQFT_VALUE",
    "MIN_SQFT_VALUE",
    "SqftValidation",
    "ceil_whole",
    "round2",
    "safe_number",
    "validate_sqft_input",
]

MAX_SQFT_VALUE = 100_000.0
MIN_SQFT_VALUE = 0.0

# Quotients are rounded to this many places before ceil so that float noise
# such as 2.0000000000000004 does not buy an extra unit or day.
_CEIL_PRECISION = 9


def safe_number(value: Any, default: float = 0.0) -> float:
    """Convert ``value`` to a finite float, or return ``default``.

    Strings are parsed leniently ("12.5", " 7 "); ``None``, empty strings,
    NaN and infinities fall back to the default.

    Examples:
        >>> safe_number("12.5")
        12.5
        >>> safe_number("abc", 3.0)
        3.0
        >>> safe_number(float("nan"))
        0.0
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def round2(value: float) -> float:
    """Round to 2 decimal places (display precision for areas and money)."""
    return round(value, 2)


def ceil_whole(value: float) -> int:
    """Round a non-negative quotient up to a whole number."""
    if value <= 0:
        return 0
    return math.ceil(round(value, _CEIL_PRECISION))


@dataclass(frozen=True)
class SqftValidation:
    """Result of validating an area entered in sq.ft."""

    is_valid: bool
    sanitized_value: float
    error: str | None = None


def validate_sqft_input(value: Any) -> SqftValidation:
    """Validate an area value, clamping it into the supported range."""
    number = safe_number(value, 0.0)
    if number < MIN_SQFT_VALUE:
        return SqftValidation(False, 0.0, "Area cannot be negative")
    if number > MAX_SQFT_VALUE:
        return SqftValidation(
            False,
            MAX_SQFT_VALUE,
            f"Area exceeds maximum allowed value ({MAX_SQFT_VALUE:,.0f} sq.ft)",
        )
    return SqftValidation(True, number)
