"""Data models for price analytics results"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

import orjson


class TrendDirection(str, Enum):
    """Directional label for a price series."""
    UPWARD = "upward"
    DOWNWARD = "downward"
    STABLE = "stable"


class Momentum(str, Enum):
    """Change in trend strength between the two halves of a series."""
    ACCELERATING = "accelerating"
    DECELERATING = "decelerating"
    CONSISTENT = "consistent"


class VolatilityCategory(str, Enum):
    """Coarse bucket for the coefficient of variation."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(str, Enum):
    """Composite risk bucket."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _plain(value: Any) -> Any:
    # asdict keeps enums and tuples; reporting consumers want plain JSON types
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class Statistics:
    """Descriptive statistics for a price series"""
    mean: float
    median: float
    standard_deviation: float
    variance: float
    min_price: float
    max_price: float
    price_range: float
    volatility: float  # coefficient of variation, percent
    trend: TrendDirection
    trend_strength: float  # 0-1
    change_percentage: float  # first to last point

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class TrendAnalysis:
    """Step-wise change analysis for a price series"""
    overall_trend: TrendDirection
    trend_strength: float
    average_change: float
    max_increase: float
    max_decrease: float
    inflection_points: tuple[int, ...]  # indices into the price series
    momentum: Momentum

    @classmethod
    def neutral(cls) -> "TrendAnalysis":
        """Result for series too short to have any step changes."""
        return cls(
            overall_trend=TrendDirection.STABLE,
            trend_strength=0.0,
            average_change=0.0,
            max_increase=0.0,
            max_decrease=0.0,
            inflection_points=(),
            momentum=Momentum.CONSISTENT,
        )

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class RiskAssessment:
    """Composite risk derived from statistics and trend analysis"""
    risk_level: RiskLevel
    risk_factors: tuple[str, ...]
    stability_score: int  # 0-100
    risk_score: int  # raw additive score, unclamped

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class AnalysisReport:
    """Complete analytics output for one merged price series"""
    commodity: str
    statistics: Statistics
    trend: TrendAnalysis
    volatility_category: VolatilityCategory
    risk: RiskAssessment
    historical_count: int = 0
    predicted_count: int = 0

    @property
    def point_count(self) -> int:
        return self.historical_count + self.predicted_count

    def to_dict(self) -> dict[str, Any]:
        """Plain-type representation for the reporting layer."""
        return _plain(asdict(self))

    def to_json(self) -> bytes:
        """Serialize the report as JSON bytes."""
        return orjson.dumps(self.to_dict())
