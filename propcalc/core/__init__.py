"""Core numeric, loan and infrastructure helpers."""

from .exceptions import (
    InvalidParameterError,
    PresetNotFoundError,
    PropCalcError,
    SimulationError,
)
from .financial import (
    amortize_months,
    calculate_monthly_payment,
    monthly_rate_from_annual,
)
from .numeric import (
    percentage,
    round_currency,
    round_half_up,
    round_whole,
    safe_divide,
    saturate,
)

__all__ = [
    "calculate_monthly_payment",
    "amortize_months",
    "monthly_rate_from_annual",
    "round_half_up",
    "round_currency",
    "round_whole",
    "safe_divide",
    "percentage",
    "saturate",
    # Exceptions
    "PropCalcError",
    "SimulationError",
    "InvalidParameterError",
    "PresetNotFoundError",
]
