# app/services/numeric.py
# -----------------------------------------------------------------------------
# Single numeric coercion policy for the whole engine
# - form values may arrive as None, "", "abc", "1,200" ... never raise
# -----------------------------------------------------------------------------
import math
from typing import Any


def to_safe_number(value: Any, fallback: float = 0.0) -> float:
    """
    Coerce `value` to a finite float.

    None, empty/blank strings, bools, unparsable strings, ints too large for a
    float, NaN and +/-inf all yield `fallback`. Numeric strings are parsed
    after stripping whitespace. The default fallback is 0; callers that need
    something else (ink usage falls back to 1) pass it explicitly.
    """
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return fallback
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(num):
        return fallback
    return num


def safe_divide(numerator: Any, denominator: Any, fallback: float = 0.0) -> float:
    """Division that yields `fallback` when the denominator is zero or unusable."""
    num = to_safe_number(numerator)
    den = to_safe_number(denominator)
    if den == 0:
        return fallback
    return num / den
