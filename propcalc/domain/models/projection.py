"""Projection data models.

A projection is the year-indexed sequence of portfolio states produced by
the simulator, year 0 being the state at acquisition.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterator

import pandas as pd

from propcalc.core.exceptions import InvalidParameterError, SimulationError

PROJECTION_YEARS = 25


@dataclass(frozen=True)
class ProjectionPoint:
    """Single year of the projection."""

    year: int
    property_value: float
    equity: float
    total_rent_collected: float
    cumulative_cash_flow: float
    mortgage_balance: float
    annual_rent: float
    annual_mortgage: float
    annual_cash_flow: float

    def to_dict(self) -> dict[str, Any]:
        """Chart-ready dict keyed the way time-series widgets expect."""
        return {
            "year": self.year,
            "propertyValue": self.property_value,
            "equity": self.equity,
            "totalRentCollected": self.total_rent_collected,
            "cumulativeCashFlow": self.cumulative_cash_flow,
            "mortgageBalance": self.mortgage_balance,
            "annualRent": self.annual_rent,
            "annualMortgage": self.annual_mortgage,
            "annualCashFlow": self.annual_cash_flow,
        }


@dataclass(frozen=True)
class ProjectionSeries:
    """Ordered, immutable sequence of projection points (ascending year)."""

    points: tuple[ProjectionPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ProjectionPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> ProjectionPoint:
        return self.points[index]

    @property
    def years(self) -> list[int]:
        return [p.year for p in self.points]

    @property
    def final(self) -> ProjectionPoint:
        """Last projected year (the horizon)."""
        if not self.points:
            raise SimulationError("Cannot read the horizon of an empty projection")
        return self.points[-1]

    def by_year(self, year: int) -> ProjectionPoint:
        """Look up the point for a given year.

        Raises:
            InvalidParameterError: If the year is outside the projection.
        """
        for point in self.points:
            if point.year == year:
                return point
        raise InvalidParameterError("year", year, f"outside projection years 0..{len(self.points) - 1}")

    def to_records(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.points]

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view, one row per year indexed by ``year``."""
        columns = list(ProjectionPoint.__dataclass_fields__)
        df = pd.DataFrame([asdict(p) for p in self.points], columns=columns)
        return df.set_index("year")
