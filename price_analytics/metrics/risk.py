"""Composite risk assessment from statistics and trend analysis"""

from typing import Optional

from ..config.defaults import RiskParams
from ..models.analysis import RiskAssessment, RiskLevel, Statistics, TrendAnalysis
from ..utils.numeric import safe_divide

HIGH_VOLATILITY = "High price volatility"
MODERATE_VOLATILITY = "Moderate price volatility"
STRONG_TREND = "Strong directional trend"
FREQUENT_REVERSALS = "Frequent trend reversals"
WIDE_RANGE = "Wide price range"


def classify_risk_score(risk_score: int, params: Optional[RiskParams] = None) -> RiskLevel:
    """Map a raw additive score to a risk level."""
    params = params or RiskParams()
    if risk_score < params.low_risk_cutoff:
        return RiskLevel.LOW
    if risk_score < params.medium_risk_cutoff:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def assess_risk(statistics: Statistics, trend: TrendAnalysis,
                params: Optional[RiskParams] = None) -> RiskAssessment:
    """
    Score risk additively from volatility, trend strength, reversals and range

    Both inputs are expected to come from the same price series; this is not
    checked. Factors are appended in scoring order.

    Args:
        statistics: Output of compute_statistics
        trend: Output of analyze_trend
        params: Scoring thresholds and points (defaults if None)

    Returns:
        RiskAssessment value
    """
    params = params or RiskParams()
    risk_factors: list[str] = []
    risk_score = 0

    if statistics.volatility > params.high_volatility_threshold:
        risk_factors.append(HIGH_VOLATILITY)
        risk_score += params.high_volatility_points
    elif statistics.volatility > params.moderate_volatility_threshold:
        risk_factors.append(MODERATE_VOLATILITY)
        risk_score += params.moderate_volatility_points

    if trend.trend_strength > params.strong_trend_threshold:
        risk_factors.append(STRONG_TREND)
        risk_score += params.strong_trend_points

    if len(trend.inflection_points) > params.max_inflection_points:
        risk_factors.append(FREQUENT_REVERSALS)
        risk_score += params.reversal_points

    # Zero mean makes the ratio undefined; treat it as no range risk
    if safe_divide(statistics.price_range, statistics.mean) > params.wide_range_ratio:
        risk_factors.append(WIDE_RANGE)
        risk_score += params.wide_range_points

    return RiskAssessment(
        risk_level=classify_risk_score(risk_score, params),
        risk_factors=tuple(risk_factors),
        stability_score=max(0, 100 - risk_score),
        risk_score=risk_score,
    )
