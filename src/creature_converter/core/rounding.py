"""Rounding helpers shared by the profile registry and the engine.

Balance targets round halves upward (2.5 -> 3, -0.5 -> 0), unlike the
built-in ``round`` which rounds halves to even.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-1.5)
        -1
    """
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves toward positive infinity.

    Example:
        >>> round_tenth(4.55)
        4.6
    """
    return round_half_up(value * 10) / 10


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


__all__ = ["round_half_up", "round_tenth", "clamp"]
