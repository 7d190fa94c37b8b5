"""Integration tests for the full analytics pipeline."""

from datetime import date

import orjson

from price_analytics import (
    PriceAnalysisEngine,
    analyze_trend,
    assess_risk,
    categorize_volatility,
    compute_statistics,
)
from price_analytics.data.models import PriceKind, merge_series
from price_analytics.models.analysis import Momentum, RiskLevel, TrendDirection


class TestFullPipeline:
    """Run every component over merged historical and forecast series."""

    def test_public_functions_compose(self, make_series):
        historical = make_series([100, 120, 90, 130, 80])
        predicted = make_series([140, 70, 150], start=date(2024, 1, 6),
                                kind=PriceKind.PREDICTED)
        series = merge_series(historical, predicted)

        stats = compute_statistics(series)
        trend = analyze_trend(series)
        category = categorize_volatility(stats.volatility)
        risk = assess_risk(stats, trend)

        # changes alternate sign, so every scanned pair reverses
        assert trend.inflection_points == (2, 3, 4, 5, 6)
        assert stats.volatility > 15
        assert category.value == "high"
        assert risk.risk_factors[0] == "High price volatility"
        assert "Frequent trend reversals" in risk.risk_factors
        assert "Wide price range" in risk.risk_factors
        assert risk.risk_level == RiskLevel.HIGH
        assert risk.stability_score == 100 - risk.risk_score

    def test_steady_uptrend(self, make_series):
        series = make_series([1000 + 5 * i for i in range(30)])

        stats = compute_statistics(series)
        trend = analyze_trend(series)
        risk = assess_risk(stats, trend)

        assert stats.trend == TrendDirection.UPWARD
        assert trend.overall_trend == TrendDirection.UPWARD
        assert trend.momentum == Momentum.CONSISTENT
        assert trend.inflection_points == ()
        assert risk.risk_factors == ("Strong directional trend",)
        assert risk.risk_level == RiskLevel.MEDIUM
        assert risk.stability_score == 80

    def test_repeated_runs_are_identical(self, tmp_path, crop_payload):
        engine = PriceAnalysisEngine(config_dir=tmp_path)

        first = engine.analyze_payload(crop_payload)
        second = engine.analyze_payload(orjson.dumps(crop_payload))

        assert first == second
        assert first.to_json() == second.to_json()
