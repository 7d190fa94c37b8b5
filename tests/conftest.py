"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from typing import Callable, Sequence

import pytest

from price_analytics.data.models import PriceKind, PricePoint


def build_series(prices: Sequence[float], start: date = date(2024, 1, 1),
                 kind: PriceKind = PriceKind.HISTORICAL) -> tuple[PricePoint, ...]:
    """Daily price points starting at ``start``."""
    return tuple(
        PricePoint(timestamp=start + timedelta(days=i), price=float(price), kind=kind)
        for i, price in enumerate(prices)
    )


@pytest.fixture
def make_series() -> Callable[..., tuple[PricePoint, ...]]:
    """Factory for daily price series."""
    return build_series


@pytest.fixture
def reversal_series() -> tuple[PricePoint, ...]:
    """Series with step changes [2, -1, 4, -10, 15]."""
    return build_series([100, 102, 101, 105, 95, 110])


@pytest.fixture
def crop_payload() -> dict:
    """Crop price payload as produced by the forecasting service."""
    return {
        "cropName": "Wheat",
        "historical": [
            {"date": "2024-01-01", "price": 1500.0, "type": "Historical"},
            {"date": "2024-01-02", "price": 1510.0, "type": "Historical"},
            {"date": "2024-01-03", "price": 1505.0, "type": "Historical"},
        ],
        "predicted": [
            {"date": "2024-01-04", "price": 1520.0, "type": "Predicted"},
            {"date": "2024-01-05", "price": 1530.0, "type": "Predicted"},
        ],
    }


@pytest.fixture
def config_dir(tmp_path):
    """Config directory with a commodities.yaml override file."""
    (tmp_path / "commodities.yaml").write_text(
        "commodities:\n"
        "  Tomato:\n"
        "    volatility:\n"
        "      high_threshold: 25.0\n"
        "    risk:\n"
        "      high_volatility_threshold: 25.0\n"
        "  Onion:\n"
        "    risk:\n"
        "      max_inflection_points: 5\n"
    )
    return tmp_path
