"""Rounding helpers for comparing real-valued statistics against integer expectations."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded toward positive infinity.

    Python's built-in round() uses banker's rounding (round(16.5) == 16);
    suite expectations are written for the conventional rule instead.

    Examples:
        >>> round_half_up(26.15)
        26
        >>> round_half_up(16.5)
        17
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)
