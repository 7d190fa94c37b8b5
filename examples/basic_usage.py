#!/usr/bin/env python3
"""
Basic Usage Example - Price Analytics Engine

This script demonstrates the basic usage of the price analytics engine with
a simulated crop price series. It shows how to:
- Build historical and forecast price series
- Run the individual analytics functions
- Run the full engine with per-commodity configuration
- Serialize the report for a reporting layer

Run: python examples/basic_usage.py
"""

import math
import random
from datetime import date, timedelta

from price_analytics import (
    PriceAnalysisEngine,
    analyze_trend,
    assess_risk,
    categorize_volatility,
    compute_statistics,
)
from price_analytics.data.models import PriceKind, PricePoint, merge_series
from price_analytics.logging import configure_logging


def create_price_series(days: int, start: date, base_price: float,
                        kind: PriceKind, seed: int) -> list[PricePoint]:
    """Create a seasonal price series with some noise."""
    rng = random.Random(seed)
    points = []
    for i in range(days):
        price = base_price + math.sin(i / 10) * 50 + rng.random() * 20
        points.append(PricePoint(
            timestamp=start + timedelta(days=i),
            price=round(price, 2),
            kind=kind,
        ))
    return points


def demonstrate_functions(historical: list[PricePoint], predicted: list[PricePoint]) -> None:
    """Run each analytics function on its own."""
    print("📊 INDIVIDUAL ANALYTICS")
    print("=" * 50)

    series = merge_series(historical, predicted)

    stats = compute_statistics(series)
    print(f"Mean: {stats.mean:.2f}  Median: {stats.median:.2f}  Std: {stats.standard_deviation:.2f}")
    print(f"Range: {stats.min_price:.2f} - {stats.max_price:.2f}")
    print(f"Volatility: {stats.volatility:.2f}% ({categorize_volatility(stats.volatility).value})")
    print(f"Trend: {stats.trend.value} (strength {stats.trend_strength:.2f}, change {stats.change_percentage:.2f}%)")

    trend = analyze_trend(series)
    print(f"Average step change: {trend.average_change:.2f}")
    print(f"Inflection points: {list(trend.inflection_points)}")
    print(f"Momentum: {trend.momentum.value}")

    risk = assess_risk(stats, trend)
    print(f"Risk: {risk.risk_level.value} (stability {risk.stability_score}/100)")
    for factor in risk.risk_factors:
        print(f"  - {factor}")
    print()


def demonstrate_engine(historical: list[PricePoint], predicted: list[PricePoint]) -> None:
    """Run the engine for two commodities with different thresholds."""
    print("⚙️ ENGINE WITH COMMODITY CONFIGURATION")
    print("=" * 50)

    engine = PriceAnalysisEngine()

    for commodity in ("Wheat", "Tomato"):
        report = engine.analyze(commodity, historical, predicted)
        print(f"{commodity}: volatility category {report.volatility_category.value}, "
              f"risk {report.risk.risk_level.value}")

    report = engine.analyze("Wheat", historical, predicted)
    print(f"\nJSON report ({len(report.to_json())} bytes):")
    print(report.to_json().decode()[:200] + "...")
    print()


def main() -> None:
    configure_logging(level="INFO")

    today = date(2024, 6, 1)
    historical = create_price_series(30, today - timedelta(days=30), 1500.0,
                                     PriceKind.HISTORICAL, seed=7)
    predicted = create_price_series(30, today, 1520.0, PriceKind.PREDICTED, seed=11)

    demonstrate_functions(historical, predicted)
    demonstrate_engine(historical, predicted)


if __name__ == "__main__":
    main()
