"""Preset scenario data model.

A preset is a named template that fills a complete assumption set in one
step, with the deposit given as a percentage of price.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .assumptions import AssumptionSet


class ScenarioPreset(BaseModel):
    """Named investment scenario template."""

    # Identity
    key: str = Field(..., description="Unique identifier for the preset")
    label: str = Field(..., description="Display label")

    # Purchase & financing
    property_price: float = Field(..., gt=0, description="Purchase price")
    deposit_percent: float = Field(..., ge=0, le=100, description="Deposit as % of price")
    interest_rate: float = Field(..., ge=0, description="Annual mortgage rate %")
    mortgage_term: int = Field(..., gt=0, description="Mortgage term in years")

    # Income & Expenses
    monthly_rent: float = Field(..., ge=0, description="Monthly rent")
    monthly_expenses: float = Field(default=0.0, ge=0, description="Monthly running costs")

    # Market hypotheses
    annual_appreciation: float = Field(default=0.0, description="Annual property value growth %")
    annual_rent_increase: float = Field(default=0.0, description="Annual rent growth %")

    model_config = {
        "frozen": True,
    }

    def to_assumptions(self) -> AssumptionSet:
        """Expand the template into a full assumption set."""
        return AssumptionSet.from_deposit_percent(
            self.property_price,
            self.deposit_percent,
            interest_rate=self.interest_rate,
            mortgage_term=self.mortgage_term,
            monthly_rent=self.monthly_rent,
            monthly_expenses=self.monthly_expenses,
            annual_appreciation=self.annual_appreciation,
            annual_rent_increase=self.annual_rent_increase,
        )
