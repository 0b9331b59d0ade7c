"""
Range & Numeric Validation

Primitive checks underlying every numeric validation in the engine.
A value outside its physical range is never merely suspicious, so these
checks only ever produce errors.
"""

import math
import numbers
from typing import Any

import numpy as np


def is_number(value: Any) -> bool:
    """True for real numbers (numpy scalars included), excluding bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def is_valid_number(value: Any) -> bool:
    """True for real, non-NaN numbers (ints of any width included)."""
    if not is_number(value):
        return False
    try:
        return not math.isnan(value)
    except OverflowError:
        # int too wide for a float; whole numbers are never NaN
        return True


def is_within_range(value: Any, range_min: float, range_max: float) -> bool:
    """
    Check a value against the closed interval [range_min, range_max].

    None, NaN and non-numeric values are never within range.
    """
    if not is_valid_number(value):
        return False
    return bool(range_min <= value <= range_max)


def clamp(value: Any, range_min: float, range_max: float) -> float:
    """Clamp into [range_min, range_max]; unusable values fall back to range_min."""
    if not is_valid_number(value):
        return range_min
    return float(max(range_min, min(range_max, value)))
