"""
Standardized derived views over engine output.

Small read-only summaries that results and chart widgets build on: where
the monthly rent goes, the break-even delay in years and months, and the
state of the investment at the projection horizon.
"""
from __future__ import annotations

from dataclasses import dataclass

from propcalc.core.exceptions import SimulationError
from propcalc.core.financial import MONTHS_PER_YEAR
from propcalc.core.numeric import percentage, saturate
from propcalc.domain.models.assumptions import AssumptionSet
from propcalc.domain.models.metrics import MetricsSnapshot
from propcalc.domain.models.projection import ProjectionSeries


@dataclass(frozen=True)
class BreakdownSlice:
    name: str
    monthly_amount: float
    share_of_rent: float


@dataclass(frozen=True)
class BreakEvenDuration:
    years: int
    months: int
    total_months: int


@dataclass(frozen=True)
class HorizonSummary:
    year: int
    property_value: float
    equity: float
    cumulative_cash_flow: float
    total_rent_collected: float
    mortgage_free_year: int | None


def monthly_breakdown(
    assumptions: AssumptionSet,
    metrics: MetricsSnapshot,
) -> list[BreakdownSlice]:
    """
    Split the monthly rent into mortgage, expenses and surplus cash flow.

    Surplus is floored at 0 (a shortfall is not a slice), and empty
    slices are dropped. Shares are % of monthly rent, 0 when there is no rent.
    """
    surplus = max(
        0.0,
        saturate(saturate(assumptions.monthly_rent - metrics.monthly_payment) - assumptions.monthly_expenses),
    )
    slices = [
        ("Mortgage", metrics.monthly_payment),
        ("Expenses", assumptions.monthly_expenses),
        ("Cash Flow", surplus),
    ]
    return [
        BreakdownSlice(
            name=name,
            monthly_amount=amount,
            share_of_rent=percentage(amount, assumptions.monthly_rent),
        )
        for name, amount in slices
        if amount > 0
    ]


def break_even_duration(break_even_months: int) -> BreakEvenDuration | None:
    """Express a break-even month count as years + months (None for never)."""
    if break_even_months < 0:
        return None
    years, months = divmod(break_even_months, MONTHS_PER_YEAR)
    return BreakEvenDuration(years=years, months=months, total_months=break_even_months)


def horizon_summary(series: ProjectionSeries) -> HorizonSummary:
    """
    Summarise the projection at its final year.

    Raises:
        SimulationError: If the series has no points.
    """
    if len(series) == 0:
        raise SimulationError("Cannot summarise an empty projection")

    final = series.final
    mortgage_free_year = next(
        (p.year for p in series if p.mortgage_balance == 0),
        None,
    )
    return HorizonSummary(
        year=final.year,
        property_value=final.property_value,
        equity=final.equity,
        cumulative_cash_flow=final.cumulative_cash_flow,
        total_rent_collected=final.total_rent_collected,
        mortgage_free_year=mortgage_free_year,
    )
