"""Metrics calculator, projection simulator and derived views."""

from .breakdown import (
    BreakdownSlice,
    BreakEvenDuration,
    HorizonSummary,
    break_even_duration,
    horizon_summary,
    monthly_breakdown,
)
from .metrics import calculate_break_even_months, compute
from .projection import project

__all__ = [
    "compute",
    "project",
    "calculate_break_even_months",
    "monthly_breakdown",
    "break_even_duration",
    "horizon_summary",
    "BreakdownSlice",
    "BreakEvenDuration",
    "HorizonSummary",
]
