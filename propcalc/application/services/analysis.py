"""End-to-end investment analysis.

Runs the metrics calculator then the projection simulator for one
assumption set, memoising results by value so unchanged inputs are never
recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Callable

from propcalc.core.logging import get_logger
from propcalc.core.settings import get_settings
from propcalc.domain.calculator.metrics import compute
from propcalc.domain.calculator.projection import project
from propcalc.domain.models.assumptions import AssumptionSet
from propcalc.domain.models.metrics import MetricsSnapshot
from propcalc.domain.models.projection import ProjectionSeries

if TYPE_CHECKING:
    from functools import _CacheInfo

log = get_logger(__name__)

_cached_run: Callable[[AssumptionSet, bool], InvestmentAnalysis] | None = None


@dataclass(frozen=True)
class InvestmentAnalysis:
    """Metrics snapshot and projection produced from one assumption set.

    Always the full, ungated result; hiding parts of it is up to the caller.
    """

    assumptions: AssumptionSet
    metrics: MetricsSnapshot
    projection: ProjectionSeries


def _run_analysis(
    assumptions: AssumptionSet,
    stop_payments_after_payoff: bool,
) -> InvestmentAnalysis:
    metrics = compute(assumptions)
    projection = project(
        assumptions, metrics, stop_payments_after_payoff=stop_payments_after_payoff
    )
    log.debug(
        "analysis_computed",
        property_price=assumptions.property_price,
        monthly_payment=metrics.monthly_payment,
        roi=metrics.roi,
    )
    return InvestmentAnalysis(assumptions=assumptions, metrics=metrics, projection=projection)


def _get_cached_run() -> Callable[[AssumptionSet, bool], InvestmentAnalysis]:
    global _cached_run
    if _cached_run is None:
        maxsize = get_settings().analysis_cache_size
        _cached_run = lru_cache(maxsize=maxsize)(_run_analysis)
        log.info("analysis_cache_created", maxsize=maxsize)
    return _cached_run


def analyse_investment(
    assumptions: AssumptionSet,
    *,
    stop_payments_after_payoff: bool = False,
) -> InvestmentAnalysis:
    """Compute metrics and the 25-year projection for an assumption set.

    Equal assumption sets return the same cached InvestmentAnalysis.

    Args:
        assumptions: Investment assumptions
        stop_payments_after_payoff: Forwarded to ``project``

    Returns:
        InvestmentAnalysis bundle
    """
    return _get_cached_run()(assumptions, stop_payments_after_payoff)


def analysis_cache_info() -> _CacheInfo:
    """Hit/miss statistics of the analysis memo (functools cache_info)."""
    return _get_cached_run().cache_info()


def clear_analysis_cache() -> None:
    """Drop every memoised analysis."""
    if _cached_run is not None:
        _cached_run.cache_clear()
        log.debug("analysis_cache_cleared")
