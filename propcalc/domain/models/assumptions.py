"""Assumption set data model.

An assumption set is the immutable bundle of investment parameters that
drives one metrics + projection run.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from propcalc.core.numeric import percentage, round_half_up


class AssumptionSet(BaseModel):
    """Investment assumptions for a single buy-to-let property.

    Rates are percentages (4.5 means 4.5%). Only arithmetic safety is
    validated: every value must be finite. Business sanity (deposit above
    price, negative rent) is left to the caller.
    """

    # Purchase
    property_price: float = Field(default=250_000.0, description="Purchase price")
    deposit_amount: float = Field(default=62_500.0, description="Cash deposit")

    # Financing
    interest_rate: float = Field(default=4.5, description="Annual mortgage rate %")
    mortgage_term: int = Field(default=25, description="Mortgage term in years")

    # Income & Expenses
    monthly_rent: float = Field(default=1_200.0, description="Monthly rent")
    monthly_expenses: float = Field(default=200.0, description="Monthly running costs ex-mortgage")

    # Market hypotheses
    annual_appreciation: float = Field(default=3.5, description="Annual property value growth %")
    annual_rent_increase: float = Field(default=2.5, description="Annual rent growth %")

    model_config = {
        "frozen": True,
        "allow_inf_nan": False,
        "extra": "forbid",
    }

    @classmethod
    def from_deposit_percent(
        cls,
        property_price: float,
        deposit_percent: float,
        **fields: Any,
    ) -> AssumptionSet:
        """Build an assumption set from a deposit expressed as % of price.

        The deposit amount is rounded to whole currency units.
        """
        deposit_amount = round_half_up(property_price * (deposit_percent / 100.0))
        return cls(property_price=property_price, deposit_amount=deposit_amount, **fields)

    @property
    def deposit_percent(self) -> float:
        """Deposit as a whole-number % of price (display only, 0 when price is 0)."""
        return round_half_up(percentage(self.deposit_amount, self.property_price))

    @property
    def loan_amount(self) -> float:
        """Amount borrowed (unclamped)."""
        return self.property_price - self.deposit_amount

    def with_deposit_percent(self, deposit_percent: float) -> AssumptionSet:
        """Return a copy with the deposit recomputed from a % of price."""
        deposit_amount = round_half_up(self.property_price * (deposit_percent / 100.0))
        return self.model_validate({**self.model_dump(), "deposit_amount": deposit_amount})

    def with_deposit_amount(self, deposit_amount: float) -> AssumptionSet:
        """Return a copy with a new deposit amount."""
        return self.model_validate({**self.model_dump(), "deposit_amount": deposit_amount})

    def with_property_price(self, property_price: float) -> AssumptionSet:
        """Return a copy with a new price, keeping the current deposit %."""
        pct = self.deposit_percent
        deposit_amount = round_half_up(property_price * (pct / 100.0))
        return self.model_validate({
            **self.model_dump(),
            "property_price": property_price,
            "deposit_amount": deposit_amount,
        })
