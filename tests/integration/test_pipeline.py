"""Integration test for the full analysis pipeline.

Preset -> assumptions -> analysis -> derived views -> tabular export.
"""

import pandas as pd
import pytest

import propcalc
from propcalc.domain.calculator.breakdown import (
    break_even_duration,
    horizon_summary,
    monthly_breakdown,
)
from propcalc.domain.presets import list_presets, preset_assumptions


class TestPresetPipeline:
    """Every preset runs end to end."""

    @pytest.mark.parametrize("preset", list_presets(), ids=lambda p: p.key)
    def test_preset_end_to_end(self, preset):
        assumptions = preset.to_assumptions()
        analysis = propcalc.analyse_investment(assumptions)

        assert analysis.metrics.loan_amount == pytest.approx(
            assumptions.property_price - assumptions.deposit_amount
        )
        assert len(analysis.projection) == 26

        summary = horizon_summary(analysis.projection)
        assert summary.year == 25
        assert summary.property_value > assumptions.property_price
        if assumptions.mortgage_term > 25:
            assert summary.mortgage_free_year is None

        slices = monthly_breakdown(assumptions, analysis.metrics)
        assert slices[0].name == "Mortgage"

    def test_dataframe_export(self):
        analysis = propcalc.analyse_investment(preset_assumptions("london_property"))
        df = analysis.projection.to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert df.index.name == "year"
        assert list(df.index) == list(range(26))
        assert df.loc[0, "property_value"] == 500_000
        assert df["property_value"].is_monotonic_increasing
        assert (df["mortgage_balance"].diff().dropna() <= 0).all()

    def test_records_are_chart_ready(self):
        analysis = propcalc.analyse_investment(preset_assumptions("buy_to_let"))
        records = analysis.projection.to_records()
        assert records[0]["year"] == 0
        assert records[0]["propertyValue"] == 250_000
        assert records[-1]["year"] == 25


class TestUserEditFlow:
    """A user tweaking inputs after picking a preset."""

    def test_deposit_change_improves_cash_flow(self):
        base = preset_assumptions("first_time_buyer")
        bigger_deposit = base.with_deposit_percent(40)

        before = propcalc.analyse_investment(base).metrics
        after = propcalc.analyse_investment(bigger_deposit).metrics

        assert bigger_deposit.deposit_amount == 80_000
        assert after.monthly_payment < before.monthly_payment
        assert after.monthly_cash_flow > before.monthly_cash_flow
        assert after.ltv == pytest.approx(60.0)

    def test_positive_cash_flow_break_even(self):
        """Cash purchase of the northern preset pays back the deposit."""
        a = preset_assumptions("northern_powerhouse").with_deposit_percent(100)
        analysis = propcalc.analyse_investment(a)

        assert analysis.metrics.monthly_payment == 0
        assert analysis.metrics.monthly_cash_flow == 680
        duration = break_even_duration(analysis.metrics.break_even_months)
        # 150,000 / 680 = 220.6 -> 221 months
        assert (duration.years, duration.months) == (18, 5)
        assert horizon_summary(analysis.projection).mortgage_free_year == 0

    def test_compute_and_project_exports(self):
        a = preset_assumptions("buy_to_let")
        metrics = propcalc.compute(a)
        series = propcalc.project(a, metrics)
        assert series == propcalc.analyse_investment(a).projection
