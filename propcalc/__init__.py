"""propcalc - Property Investment Calculation & Projection Engine

Turns a set of investment assumptions into a metrics snapshot and a
25-year projection of value, equity, mortgage balance and cash flow.

Modules:
    - core: numeric helpers, loan maths, logging, settings and exceptions
    - domain.models: Pydantic/dataclass models for assumptions and results
    - domain.calculator: metrics calculator, projection simulator, derived views
    - domain.presets: named preset scenarios
    - application.services: memoised end-to-end analysis
"""

__version__ = "1.0.0"

from propcalc.application.services.analysis import (
    InvestmentAnalysis,
    analyse_investment,
    clear_analysis_cache,
)
from propcalc.domain.calculator.metrics import compute
from propcalc.domain.calculator.projection import project
from propcalc.domain.models import (
    AssumptionSet,
    MetricsSnapshot,
    ProjectionPoint,
    ProjectionSeries,
)

__all__ = [
    "compute",
    "project",
    "analyse_investment",
    "clear_analysis_cache",
    "InvestmentAnalysis",
    "AssumptionSet",
    "MetricsSnapshot",
    "ProjectionPoint",
    "ProjectionSeries",
]
