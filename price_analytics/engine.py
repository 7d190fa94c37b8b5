"""
Main analysis engine coordinator.

Orchestrates the price analytics pipeline: configuration resolution, payload
parsing, series merging, metrics calculation and structured logging of the
resulting risk assessment.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader, build_config
from .config.validation import ConfigValidator
from .data.models import PricePoint, merge_series
from .data.parsers import parse_price_payload
from .errors import ConfigurationError, DataQualityError
from .logging.config import get_analysis_logger, log_risk_assessment
from .metrics.calculator import PriceMetricsCalculator
from .models.analysis import AnalysisReport

logger = structlog.get_logger(__name__)
analysis_logger = get_analysis_logger(__name__)


class PriceAnalysisEngine:
    """
    Main coordinator for commodity price analytics.

    Raw payload → Parsing → Series merge → Metrics → Risk logging
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize the analysis engine."""
        self.logger = logger
        self.analysis_logger = analysis_logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)

        self.logger.info(
            "Price analysis engine initialized",
            config_dir=str(self.config_loader.config_dir)
        )

    def resolve_calculator(
        self,
        commodity: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> PriceMetricsCalculator:
        """
        Build a calculator for a commodity with merged, validated thresholds.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.config_loader.merge_config(commodity, overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error(
                "Analytics configuration validation failed",
                commodity=commodity,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid analytics configuration for {commodity or 'default'}",
                errors=error_msgs,
                commodity=commodity,
            )

        return PriceMetricsCalculator(build_config(merged))

    def analyze(
        self,
        commodity: str,
        historical: Sequence[PricePoint],
        predicted: Sequence[PricePoint] = (),
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisReport:
        """
        Analyze a commodity's historical and forecast prices.

        Args:
            commodity: Commodity name (selects per-commodity thresholds)
            historical: Observed prices in chronological order
            predicted: Forecast prices following the historical series
            overrides: Per-call threshold overrides, highest precedence

        Returns:
            AnalysisReport for the merged series

        Raises:
            TemporalDataError: If the series are not chronological
            EmptyInputError: If both series are empty
            ConfigurationError: If thresholds are invalid
        """
        calculator = self.resolve_calculator(commodity, overrides)

        try:
            series = merge_series(historical, predicted)
            report = calculator.calculate(series, commodity=commodity)
        except DataQualityError as e:
            self.logger.warning(
                "Price data rejected",
                commodity=commodity,
                error_type=type(e).__name__,
                error=str(e),
                recoverable=e.recoverable,
            )
            raise

        log_risk_assessment(
            self.analysis_logger,
            commodity,
            report.risk,
            context={
                "historical_count": report.historical_count,
                "predicted_count": report.predicted_count,
                "trend": report.statistics.trend.value,
                "momentum": report.trend.momentum.value,
                "volatility_category": report.volatility_category.value,
            },
        )
        return report

    def analyze_payload(
        self,
        raw: Union[str, bytes, Mapping[str, Any]],
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisReport:
        """Parse a crop price payload and analyze it."""
        commodity, historical, predicted = parse_price_payload(raw)
        return self.analyze(commodity, historical, predicted, overrides)
