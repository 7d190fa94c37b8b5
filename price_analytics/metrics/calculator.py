"""Main metrics calculator coordinating all price analytics"""

from collections.abc import Sequence
from typing import Any, Callable, Optional, TypeVar

from ..config.defaults import AnalyticsConfig, get_default_config
from ..data.models import PriceKind, PricePoint
from ..errors import DataQualityError, MetricsCalculationError
from ..logging.config import get_analysis_logger
from ..models.analysis import AnalysisReport
from .risk import assess_risk
from .statistics import compute_statistics
from .trend import analyze_trend
from .volatility import categorize_volatility

logger = get_analysis_logger(__name__)

T = TypeVar("T")


class PriceMetricsCalculator:
    """
    Runs every analytics component over one merged price series

    Statistics -> Trend -> Volatility category -> Risk
    """

    def __init__(self, config: Optional[AnalyticsConfig] = None):
        self.config = config or get_default_config()

    def calculate(self, points: Sequence[PricePoint], commodity: str = "") -> AnalysisReport:
        """
        Calculate the full analysis report for a price series

        Args:
            points: Merged historical + predicted points in chronological order
            commodity: Commodity name carried into the report

        Returns:
            AnalysisReport

        Raises:
            EmptyInputError: If the series has no points
            MetricsCalculationError: If a component fails unexpectedly
        """
        calculation_input = {"point_count": len(points), "commodity": commodity}

        statistics = self._run("statistics", compute_statistics, calculation_input, points)
        trend = self._run("trend", analyze_trend, calculation_input, points)
        volatility_category = self._run(
            "volatility_category", categorize_volatility, calculation_input,
            statistics.volatility, self.config.volatility,
        )
        risk = self._run("risk", assess_risk, calculation_input,
                         statistics, trend, self.config.risk)

        historical_count = sum(1 for p in points if p.kind == PriceKind.HISTORICAL)

        logger.debug(
            "Price metrics calculated",
            commodity=commodity,
            point_count=len(points),
            trend=statistics.trend.value,
            volatility=statistics.volatility,
            risk_score=risk.risk_score,
        )

        return AnalysisReport(
            commodity=commodity,
            statistics=statistics,
            trend=trend,
            volatility_category=volatility_category,
            risk=risk,
            historical_count=historical_count,
            predicted_count=len(points) - historical_count,
        )

    def _run(self, metric_name: str, func: Callable[..., T],
             calculation_input: dict[str, Any], *args: Any) -> T:
        try:
            return func(*args)
        except DataQualityError:
            raise
        except Exception as e:
            raise MetricsCalculationError(
                f"{metric_name} calculation failed: {e}",
                metric_name=metric_name,
                calculation_input=calculation_input,
            ) from e
