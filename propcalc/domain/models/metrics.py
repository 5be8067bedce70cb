"""Metrics snapshot data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Break-even sentinel: cash flow is negative, the deposit is never recovered
NEVER_BREAKS_EVEN = -1


class MetricsSnapshot(BaseModel):
    """Single-point financial indicators derived from an assumption set.

    Currency values are rounded to the penny; percentages keep full
    float precision for display formatting downstream.
    """

    # Loan
    loan_amount: float = Field(..., description="Price minus deposit")
    monthly_payment: float = Field(..., description="Monthly repayment (capital + interest)")
    total_interest: float = Field(..., description="Interest paid over the full term")
    total_repayment: float = Field(..., description="Sum of all payments over the term")

    # Yields
    gross_yield: float = Field(..., description="Annual rent as % of price")
    net_yield: float = Field(..., description="Annual rent less expenses as % of price")

    # Cash flow
    monthly_cash_flow: float = Field(..., description="Rent minus mortgage minus expenses")
    annual_cash_flow: float = Field(..., description="Monthly cash flow x 12")

    # Returns
    roi: float = Field(..., description="First-year return on deposit %")
    first_year_equity_gain: float = Field(
        default=0.0, description="Approximate year-1 principal repaid (not part of ROI)"
    )
    break_even_months: int = Field(..., ge=NEVER_BREAKS_EVEN, description="Months to recover deposit, -1 for never")
    ltv: float = Field(..., description="Loan-to-value %")

    model_config = {
        "frozen": True,
    }

    @property
    def never_breaks_even(self) -> bool:
        """True when negative cash flow means the deposit is never recovered."""
        return self.break_even_months == NEVER_BREAKS_EVEN

    @property
    def is_cash_flow_positive(self) -> bool:
        return self.monthly_cash_flow > 0

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
