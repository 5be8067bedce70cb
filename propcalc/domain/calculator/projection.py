"""Projection simulator.

Year-by-year projection of property value, equity, mortgage balance and
cash flow over a fixed 25-year horizon. Each year's point is emitted
before that year's growth and amortization are applied, so year 0 is the
state at acquisition.
"""

from __future__ import annotations

import structlog

from propcalc.core.financial import MONTHS_PER_YEAR, amortize_months
from propcalc.core.numeric import growth_factor, round_whole, saturate
from propcalc.domain.models.assumptions import AssumptionSet
from propcalc.domain.models.metrics import MetricsSnapshot
from propcalc.domain.models.projection import (
    PROJECTION_YEARS,
    ProjectionPoint,
    ProjectionSeries,
)

log = structlog.get_logger(__name__)


def project(
    assumptions: AssumptionSet,
    metrics: MetricsSnapshot,
    *,
    stop_payments_after_payoff: bool = False,
) -> ProjectionSeries:
    """Run the 25-year projection.

    Args:
        assumptions: Investment assumptions
        metrics: Snapshot from ``compute`` for the same assumptions; its
            loan amount and monthly payment drive the mortgage
        stop_payments_after_payoff: If True, years that start with the loan
            already repaid carry no mortgage outflow. By default the flat
            ``monthly_payment * 12`` is deducted every year.

    Returns:
        ProjectionSeries of 26 points (years 0..25), values rounded to whole units
    """
    a = assumptions
    appreciation = growth_factor(a.annual_appreciation)
    rent_growth = growth_factor(a.annual_rent_increase)
    annual_expenses = saturate(a.monthly_expenses * MONTHS_PER_YEAR)

    property_value = a.property_price
    mortgage_balance = metrics.loan_amount
    cumulative_cash_flow = 0.0
    current_monthly_rent = a.monthly_rent
    total_rent_collected = 0.0
    payoff_year: int | None = None

    points: list[ProjectionPoint] = []

    for year in range(PROJECTION_YEARS + 1):
        equity = max(0.0, saturate(property_value - mortgage_balance))
        annual_rent = saturate(current_monthly_rent * MONTHS_PER_YEAR)
        annual_mortgage = saturate(metrics.monthly_payment * MONTHS_PER_YEAR)
        if stop_payments_after_payoff and mortgage_balance <= 0:
            annual_mortgage = 0.0
        annual_cash_flow = saturate(saturate(annual_rent - annual_mortgage) - annual_expenses)

        points.append(ProjectionPoint(
            year=year,
            property_value=round_whole(property_value),
            equity=round_whole(equity),
            total_rent_collected=round_whole(total_rent_collected),
            cumulative_cash_flow=round_whole(cumulative_cash_flow),
            mortgage_balance=round_whole(max(0.0, mortgage_balance)),
            annual_rent=round_whole(annual_rent),
            annual_mortgage=round_whole(annual_mortgage),
            annual_cash_flow=round_whole(annual_cash_flow),
        ))

        # Advance state for next year, saturating rather than overflowing
        property_value = saturate(property_value * appreciation)
        current_monthly_rent = saturate(current_monthly_rent * rent_growth)
        total_rent_collected = saturate(total_rent_collected + annual_rent)
        cumulative_cash_flow = saturate(cumulative_cash_flow + annual_cash_flow)

        was_outstanding = mortgage_balance > 0
        mortgage_balance = amortize_months(
            mortgage_balance, a.interest_rate, metrics.monthly_payment
        )
        if was_outstanding and mortgage_balance == 0 and payoff_year is None:
            payoff_year = year + 1

    series = ProjectionSeries(points=tuple(points))

    if payoff_year is not None:
        log.debug("mortgage_paid_off", year=payoff_year)
    log.debug(
        "projection_completed",
        years=len(series),
        final_property_value=series.final.property_value,
        final_equity=series.final.equity,
    )
    return series
