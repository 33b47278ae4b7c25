"""Numeric helpers shared by the scoring and aggregation services."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    The built-in round() uses banker's rounding (round(62.5) == 62), which
    would shift threshold decisions on percentage and intensity values.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def relative_intensity(count: float, max_count: float) -> int:
    """Express a count as 0-100 relative to the largest observed count."""
    return round_half_up(count / max(max_count, 1) * 100)


def percentage_of(count: float, total: float) -> int:
    """Share of total as a rounded percentage, 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)
