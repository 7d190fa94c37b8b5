"""
Price Analytics - Commodity Price Series Analytics Engine

Computes descriptive statistics, trend and momentum classification, volatility
categories and a composite risk assessment over a chronologically ordered series
of historical and forecast commodity prices.
"""

from .engine import PriceAnalysisEngine
from .errors import EmptyInputError
from .metrics import (
    PriceMetricsCalculator,
    analyze_trend,
    assess_risk,
    categorize_volatility,
    compute_statistics,
    trend_strength,
)

__version__ = "0.1.0"
__author__ = "Price Analytics Team"

__all__ = [
    "PriceAnalysisEngine",
    "PriceMetricsCalculator",
    "EmptyInputError",
    "compute_statistics",
    "analyze_trend",
    "categorize_volatility",
    "assess_risk",
    "trend_strength",
]
