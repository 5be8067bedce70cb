"""Metrics calculator.

Derives the single-point snapshot (payment, yields, cash flow, ROI,
break-even, LTV) from an assumption set. Pure: no I/O, no state, and
every division is guarded so finite inputs never produce NaN/Infinity.
"""

from __future__ import annotations

import math

import structlog

from propcalc.core.financial import MONTHS_PER_YEAR, calculate_monthly_payment
from propcalc.core.numeric import percentage, round_currency, safe_divide, saturate
from propcalc.domain.models.assumptions import AssumptionSet
from propcalc.domain.models.metrics import NEVER_BREAKS_EVEN, MetricsSnapshot

log = structlog.get_logger(__name__)


def calculate_break_even_months(deposit_amount: float, monthly_cash_flow: float) -> int:
    """Months of cash flow needed to recover the deposit.

    Returns:
        ceil(deposit / cash flow) for positive cash flow (0 if there is no
        deposit to recover), 0 for exactly zero cash flow, and -1 when cash
        flow is negative.
    """
    if monthly_cash_flow > 0:
        return max(0, math.ceil(safe_divide(deposit_amount, monthly_cash_flow)))
    if monthly_cash_flow == 0:
        return 0
    return NEVER_BREAKS_EVEN


def compute(assumptions: AssumptionSet) -> MetricsSnapshot:
    """Compute the metrics snapshot for an assumption set.

    Sums and products that overflow saturate at the largest float, so
    finite inputs of any magnitude give finite figures.

    Args:
        assumptions: Investment assumptions

    Returns:
        MetricsSnapshot with currency values rounded to the penny
    """
    a = assumptions
    loan_amount = saturate(a.loan_amount)
    total_payments = a.mortgage_term * MONTHS_PER_YEAR

    # 1. Loan
    monthly_payment = calculate_monthly_payment(loan_amount, a.interest_rate, total_payments)
    total_repayment = saturate(monthly_payment * total_payments)
    total_interest = saturate(total_repayment - loan_amount)

    # 2. Yields
    annual_rent = saturate(a.monthly_rent * MONTHS_PER_YEAR)
    annual_expenses = saturate(a.monthly_expenses * MONTHS_PER_YEAR)
    gross_yield = percentage(annual_rent, a.property_price)
    net_yield = percentage(saturate(annual_rent - annual_expenses), a.property_price)

    # 3. Cash flow
    monthly_cash_flow = saturate(saturate(a.monthly_rent - monthly_payment) - a.monthly_expenses)
    annual_cash_flow = saturate(monthly_cash_flow * MONTHS_PER_YEAR)

    # 4. First-year return on deposit
    # Interest is spread evenly over the term, not front-loaded as in true amortization
    first_year_equity_gain = saturate(
        saturate(monthly_payment * MONTHS_PER_YEAR) - safe_divide(total_interest, a.mortgage_term)
    )
    first_year_appreciation = saturate(a.property_price * (a.annual_appreciation / 100.0))
    roi = percentage(saturate(annual_cash_flow + first_year_appreciation), a.deposit_amount)

    # 5. Break-even on the reported (rounded) cash flow
    reported_cash_flow = round_currency(monthly_cash_flow)
    break_even_months = calculate_break_even_months(a.deposit_amount, reported_cash_flow)

    ltv = percentage(loan_amount, a.property_price)

    snapshot = MetricsSnapshot(
        loan_amount=round_currency(loan_amount),
        monthly_payment=round_currency(monthly_payment),
        total_interest=round_currency(total_interest),
        total_repayment=round_currency(total_repayment),
        gross_yield=gross_yield,
        net_yield=net_yield,
        monthly_cash_flow=reported_cash_flow,
        annual_cash_flow=round_currency(annual_cash_flow),
        roi=roi,
        first_year_equity_gain=round_currency(first_year_equity_gain),
        break_even_months=break_even_months,
        ltv=ltv,
    )

    log.debug(
        "metrics_computed",
        loan_amount=snapshot.loan_amount,
        monthly_payment=snapshot.monthly_payment,
        monthly_cash_flow=snapshot.monthly_cash_flow,
        break_even_months=snapshot.break_even_months,
    )
    return snapshot
