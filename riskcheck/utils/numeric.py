"""
Numeric helpers shared by the scorer, BMI calculator, advisories and the
symptom matcher.
"""
import math
import numbers
from decimal import Decimal
from typing import Any

from .exceptions import InvalidValueError


def as_number(value: Any, factor: str = "unknown") -> float:
    """
    Return ``value`` as a finite float.

    Accepts any real number (int, float, Fraction, Decimal, numpy scalars);
    bool is not a measurement.

    Raises:
        InvalidValueError: non-numeric or non-finite value.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidValueError(
            f"Measurement '{factor}' must be numeric, got {type(value).__name__}",
            factor=factor,
            value=value,
        )
    number = float(value)
    if not math.isfinite(number):
        raise InvalidValueError(
            f"Measurement '{factor}' must be finite",
            factor=factor,
            value=value,
        )
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (42.5 -> 43)."""
    return int(math.floor(value + 0.5))
