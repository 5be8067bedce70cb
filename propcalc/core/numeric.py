"""Shared numeric helpers.

Rounding follows JavaScript's ``Math.round`` (halves go towards +inf),
not Python's banker's rounding, so figures match what calculator UIs show.
"""

from __future__ import annotations

import math
import sys

MAX_FLOAT = sys.float_info.max


def saturate(value: float) -> float:
    """Clamp an overflowed (infinite) value to the largest float of its sign."""
    if math.isinf(value):
        return math.copysign(MAX_FLOAT, value)
    return value


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves rounded up.

    Values too large to scale are already integral at float precision and
    are returned unrounded (saturated if infinite).

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    factor = 10.0 ** ndigits
    scaled = value * factor
    if not math.isfinite(scaled):
        return saturate(value)
    rounded = math.floor(scaled + 0.5) / factor
    # Normalise -0.0 so snapshots compare and print cleanly
    return rounded + 0.0


def round_currency(value: float) -> float:
    """Round a currency amount to the nearest penny."""
    return round_half_up(value, 2)


def round_whole(value: float) -> float:
    """Round a currency amount to whole units (chart granularity)."""
    return round_half_up(value, 0)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return saturate(numerator / denominator)


def percentage(part: float, whole: float) -> float:
    """Express ``part`` as a percentage of ``whole`` (0.0 when whole is 0)."""
    return saturate(safe_divide(part, whole) * 100.0)


def growth_factor(annual_pct: float) -> float:
    """Convert an annual percentage change into a multiplicative factor."""
    return 1.0 + annual_pct / 100.0
