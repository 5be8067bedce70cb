"""Unit tests for the memoised analysis service."""

from propcalc.application.services.analysis import (
    InvestmentAnalysis,
    analyse_investment,
    analysis_cache_info,
    clear_analysis_cache,
)
from propcalc.domain.calculator.metrics import compute
from propcalc.domain.calculator.projection import project
from propcalc.domain.models import AssumptionSet


class TestAnalyseInvestment:
    """End-to-end compute -> project."""

    def test_bundles_metrics_and_projection(self, example_assumptions):
        analysis = analyse_investment(example_assumptions)
        assert isinstance(analysis, InvestmentAnalysis)
        assert analysis.assumptions == example_assumptions
        assert analysis.metrics == compute(example_assumptions)
        assert analysis.projection == project(example_assumptions, analysis.metrics)

    def test_flag_forwarded(self, zero_rate_assumptions):
        analysis = analyse_investment(zero_rate_assumptions, stop_payments_after_payoff=True)
        assert analysis.projection.final.annual_mortgage == 0


class TestMemoisation:
    """Results are cached by assumption value."""

    def test_equal_inputs_hit_cache(self, example_assumptions):
        first = analyse_investment(example_assumptions)
        second = analyse_investment(AssumptionSet(**example_assumptions.model_dump()))
        assert second is first
        info = analysis_cache_info()
        assert info.hits == 1
        assert info.misses == 1

    def test_changed_inputs_recompute(self, example_assumptions):
        first = analyse_investment(example_assumptions)
        second = analyse_investment(example_assumptions.with_deposit_percent(30))
        assert second is not first
        assert second.metrics.loan_amount == 175_000
        assert analysis_cache_info().misses == 2

    def test_flag_is_part_of_key(self, zero_rate_assumptions):
        default = analyse_investment(zero_rate_assumptions)
        corrected = analyse_investment(zero_rate_assumptions, stop_payments_after_payoff=True)
        assert default is not corrected

    def test_clear(self, example_assumptions):
        first = analyse_investment(example_assumptions)
        clear_analysis_cache()
        assert analyse_investment(example_assumptions) is not first
