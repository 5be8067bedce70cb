"""Pytest fixtures for propcalc tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from propcalc.application.services.analysis import clear_analysis_cache
from propcalc.domain.models import AssumptionSet


@pytest.fixture
def example_assumptions():
    """Default calculator scenario (buy-to-let at 4.5% over 25 years)."""
    return AssumptionSet(
        property_price=250_000,
        deposit_amount=62_500,
        interest_rate=4.5,
        mortgage_term=25,
        monthly_rent=1_200,
        monthly_expenses=200,
        annual_appreciation=3.5,
        annual_rent_increase=2.5,
    )


@pytest.fixture
def zero_rate_assumptions():
    """Interest-free 10-year loan with no growth."""
    return AssumptionSet(
        property_price=100_000,
        deposit_amount=20_000,
        interest_rate=0,
        mortgage_term=10,
        monthly_rent=500,
        monthly_expenses=0,
        annual_appreciation=0,
        annual_rent_increase=0,
    )


@pytest.fixture
def cash_purchase_assumptions():
    """Outright purchase: no loan, positive cash flow."""
    return AssumptionSet(
        property_price=100_000,
        deposit_amount=100_000,
        interest_rate=4.5,
        mortgage_term=25,
        monthly_rent=1_000,
        monthly_expenses=200,
        annual_appreciation=2.0,
        annual_rent_increase=1.0,
    )


@pytest.fixture(autouse=True)
def _fresh_analysis_cache():
    """Every test starts with an empty analysis memo."""
    clear_analysis_cache()
    yield
    clear_analysis_cache()
