"""Preset scenario catalog.

One-click starting points for common UK buy-to-let profiles. A preset
expands into an ordinary AssumptionSet; the engine does not distinguish
it from manually entered values.
"""

from __future__ import annotations

from propcalc.core.exceptions import PresetNotFoundError
from propcalc.domain.models.assumptions import AssumptionSet
from propcalc.domain.models.preset import ScenarioPreset

PRESETS: dict[str, ScenarioPreset] = {
    p.key: p
    for p in (
        ScenarioPreset(
            key="first_time_buyer", label="First-Time Buyer",
            property_price=200_000, deposit_percent=10, interest_rate=4.5, mortgage_term=30,
            monthly_rent=900, monthly_expenses=150, annual_appreciation=3, annual_rent_increase=2,
        ),
        ScenarioPreset(
            key="buy_to_let", label="Buy-to-Let",
            property_price=250_000, deposit_percent=25, interest_rate=5.0, mortgage_term=25,
            monthly_rent=1_200, monthly_expenses=200, annual_appreciation=3.5, annual_rent_increase=2.5,
        ),
        ScenarioPreset(
            key="london_property", label="London Property",
            property_price=500_000, deposit_percent=20, interest_rate=4.5, mortgage_term=25,
            monthly_rent=2_200, monthly_expenses=400, annual_appreciation=4, annual_rent_increase=3,
        ),
        ScenarioPreset(
            key="northern_powerhouse", label="Northern Powerhouse",
            property_price=150_000, deposit_percent=25, interest_rate=4.5, mortgage_term=25,
            monthly_rent=800, monthly_expenses=120, annual_appreciation=4, annual_rent_increase=3,
        ),
    )
}


def list_presets() -> list[ScenarioPreset]:
    """All presets, in display order."""
    return list(PRESETS.values())


def get_preset(key: str) -> ScenarioPreset:
    """Look up a preset by key.

    Raises:
        PresetNotFoundError: If no preset has this key.
    """
    try:
        return PRESETS[key]
    except KeyError:
        raise PresetNotFoundError(key, list(PRESETS)) from None


def preset_assumptions(key: str) -> AssumptionSet:
    """Shortcut: the assumption set for a preset key."""
    return get_preset(key).to_assumptions()
