"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    ``t`` is not clamped: values outside [0, 1] extrapolate.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor

    Returns:
        ``a * (1 - t) + b * t``
    """
    return float(a) * (1.0 - t) + float(b) * t


def midpoint(low: float, high: float) -> float:
    return (low + high) / 2.0
