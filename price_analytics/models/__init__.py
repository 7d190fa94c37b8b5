"""
Derived value types produced by the analytics components.
"""
from .analysis import (
    AnalysisReport,
    Momentum,
    RiskAssessment,
    RiskLevel,
    Statistics,
    TrendAnalysis,
    TrendDirection,
    VolatilityCategory,
)

__all__ = [
    "AnalysisReport",
    "Momentum",
    "RiskAssessment",
    "RiskLevel",
    "Statistics",
    "TrendAnalysis",
    "TrendDirection",
    "VolatilityCategory",
]
