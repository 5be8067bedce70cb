"""Data models for propcalc."""

from .assumptions import AssumptionSet
from .metrics import NEVER_BREAKS_EVEN, MetricsSnapshot
from .preset import ScenarioPreset
from .projection import PROJECTION_YEARS, ProjectionPoint, ProjectionSeries

__all__ = [
    "AssumptionSet",
    "MetricsSnapshot",
    "NEVER_BREAKS_EVEN",
    "ProjectionPoint",
    "ProjectionSeries",
    "PROJECTION_YEARS",
    "ScenarioPreset",
]
