"""Application services."""

from .analysis import (
    InvestmentAnalysis,
    analyse_investment,
    analysis_cache_info,
    clear_analysis_cache,
)

__all__ = [
    "InvestmentAnalysis",
    "analyse_investment",
    "analysis_cache_info",
    "clear_analysis_cache",
]
