"""Financial calculation functions.

Core loan and amortization calculations for a repayment mortgage.
"""

from __future__ import annotations

from math import isfinite

import numpy as np
import numpy_financial as npf

from propcalc.core.numeric import saturate

MONTHS_PER_YEAR = 12
PENNY = 0.01


def monthly_rate_from_annual(annual_rate_pct: float) -> float:
    """Convert an annual percentage rate (e.g. 4.5) into a monthly decimal rate."""
    return (annual_rate_pct / 100.0) / MONTHS_PER_YEAR


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate the fixed monthly payment of a repayment mortgage.

    A negative principal (deposit above price) is not clamped and yields a
    negative payment; callers decide what that means.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate as percentage (e.g., 4.5 for 4.5%)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount, unrounded
    """
    if duration_months <= 0:
        return 0.0

    monthly_rate = monthly_rate_from_annual(annual_rate_pct)

    if monthly_rate <= 0:
        return principal / duration_months

    with np.errstate(over="ignore", invalid="ignore"):
        payment = float(-npf.pmt(monthly_rate, duration_months, principal))

    if not isfinite(payment):
        # (1+r)^n overflowed: the annuity converges to interest-only
        return saturate(principal * monthly_rate)

    return payment


def amortize_months(
    balance: float,
    annual_rate_pct: float,
    monthly_payment: float,
    months: int = MONTHS_PER_YEAR,
) -> float:
    """Step a loan balance forward month by month.

    Each month interest accrues on the opening balance and the remainder of
    the payment reduces principal. Stepping stops once the balance is paid
    off, and the result is never negative.

    A payment that falls short of the month's interest by less than a penny
    is treated as interest-only, so penny rounding cannot compound at
    extreme rates. A balance that grows without bound saturates at the
    largest float.

    Args:
        balance: Opening loan balance
        annual_rate_pct: Annual interest rate %
        monthly_payment: Payment made each month
        months: Number of months to step

    Returns:
        Closing balance, floored at 0
    """
    monthly_rate = monthly_rate_from_annual(annual_rate_pct)

    for _ in range(months):
        if balance <= 0:
            break
        interest = saturate(balance * monthly_rate)
        principal_payment = monthly_payment - interest
        if -PENNY < principal_payment < 0:
            continue
        balance = saturate(balance - principal_payment)

    return max(0.0, balance)
