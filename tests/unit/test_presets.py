"""Unit tests for the preset scenario catalog."""

import pytest

from propcalc.core.exceptions import PresetNotFoundError
from propcalc.domain.calculator.metrics import compute
from propcalc.domain.models import AssumptionSet
from propcalc.domain.presets import get_preset, list_presets, preset_assumptions


class TestCatalog:
    """Preset lookup."""

    def test_display_order(self):
        assert [p.key for p in list_presets()] == [
            "first_time_buyer",
            "buy_to_let",
            "london_property",
            "northern_powerhouse",
        ]

    def test_get_preset(self):
        preset = get_preset("london_property")
        assert preset.label == "London Property"
        assert preset.property_price == 500_000

    def test_unknown_preset(self):
        with pytest.raises(PresetNotFoundError) as exc_info:
            get_preset("mayfair_penthouse")
        assert exc_info.value.key == "mayfair_penthouse"
        assert "buy_to_let" in str(exc_info.value)


class TestPresetAssumptions:
    """Presets expand into ordinary assumption sets."""

    @pytest.mark.parametrize("key,deposit", [
        ("first_time_buyer", 20_000),
        ("buy_to_let", 62_500),
        ("london_property", 100_000),
        ("northern_powerhouse", 37_500),
    ])
    def test_deposit_from_percent(self, key, deposit):
        assert preset_assumptions(key).deposit_amount == deposit

    def test_buy_to_let_fields(self):
        a = preset_assumptions("buy_to_let")
        assert a.interest_rate == 5.0
        assert a.mortgage_term == 25
        assert a.annual_rent_increase == 2.5

    def test_same_result_as_manual_entry(self):
        """The engine cannot tell a preset from typed-in values."""
        manual = AssumptionSet(
            property_price=200_000, deposit_amount=20_000, interest_rate=4.5,
            mortgage_term=30, monthly_rent=900, monthly_expenses=150,
            annual_appreciation=3, annual_rent_increase=2,
        )
        from_preset = preset_assumptions("first_time_buyer")
        assert from_preset == manual
        assert compute(from_preset) == compute(manual)
