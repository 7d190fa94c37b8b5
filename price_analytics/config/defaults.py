"""Default threshold parameters for the analytics components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VolatilityParams:
    """Volatility category boundaries (percent, lower bound inclusive)."""
    medium_threshold: float = 5.0                    # >= this is at least medium
    high_threshold: float = 15.0                     # >= this is high


@dataclass(frozen=True)
class RiskParams:
    """
    Additive risk scoring parameters.

    The defaults are heuristic constants carried over unchanged from the
    original dashboard; they have no statistical derivation and may be tuned
    per commodity.
    """
    # Volatility (strictly greater than)
    high_volatility_threshold: float = 15.0
    high_volatility_points: int = 30
    moderate_volatility_threshold: float = 5.0
    moderate_volatility_points: int = 15

    # Directional trend
    strong_trend_threshold: float = 0.8
    strong_trend_points: int = 20

    # Reversals
    max_inflection_points: int = 3
    reversal_points: int = 25

    # Range relative to mean
    wide_range_ratio: float = 0.5
    wide_range_points: int = 15

    # Level cutoffs (score strictly below)
    low_risk_cutoff: int = 20
    medium_risk_cutoff: int = 50


@dataclass(frozen=True)
class AnalyticsConfig:
    """Complete analytics configuration."""
    volatility: VolatilityParams
    risk: RiskParams


def get_default_config() -> AnalyticsConfig:
    """Get the default configuration instance."""
    return AnalyticsConfig(
        volatility=VolatilityParams(),
        risk=RiskParams(),
    )
