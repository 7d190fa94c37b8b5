"""Analytics components for commodity price series"""

from .calculator import PriceMetricsCalculator
from .regression import trend_strength
from .risk import assess_risk
from .statistics import compute_statistics
from .trend import analyze_trend
from .volatility import categorize_volatility

__all__ = [
    "PriceMetricsCalculator",
    "trend_strength",
    "compute_statistics",
    "analyze_trend",
    "categorize_volatility",
    "assess_risk",
]
