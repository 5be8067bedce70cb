"""Custom exceptions for propcalc.

The calculation engine itself is total over finite inputs; these are
raised by the helpers around it (preset lookup, series access).
"""

from __future__ import annotations

from typing import Any


class PropCalcError(Exception):
    """Base exception for all propcalc errors."""
    pass


# --- Calculation Errors ---

class SimulationError(PropCalcError):
    """Error while reading or summarising a projection."""
    pass


class InvalidParameterError(PropCalcError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Preset Errors ---

class PresetNotFoundError(PropCalcError):
    """No preset scenario is registered under the requested key."""

    def __init__(self, key: str, available: list[str] | None = None):
        self.key = key
        self.available = available or []
        msg = f"Unknown preset '{key}'"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)
