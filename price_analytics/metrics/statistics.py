"""Descriptive statistics for a price series"""

import math
from collections.abc import Sequence

from ..data.models import PricePoint, prices_of
from ..errors import EmptyInputError
from ..models.analysis import Statistics, TrendDirection
from ..utils.numeric import ordered_mean, ordered_sum, safe_divide
from .regression import trend_strength

# First-to-last change below this many percent counts as stable
STABLE_CHANGE_PCT = 2.0


def calculate_median(prices: Sequence[float]) -> float:
    """Median of a non-empty sequence, computed on a sorted copy."""
    ordered = sorted(prices)
    count = len(ordered)
    middle = count // 2
    if count % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def calculate_volatility(standard_deviation: float, mean: float) -> float:
    """
    Coefficient of variation as a percentage.

    volatility = std / mean * 100

    A zero mean leaves the ratio undefined; 0.0 is returned in that case.
    """
    return safe_divide(standard_deviation, mean) * 100


def calculate_change_percentage(first: float, last: float) -> float:
    """Percentage change from first to last price; 0.0 when first is zero."""
    return safe_divide(last - first, first) * 100


def classify_change(change_percentage: float) -> TrendDirection:
    if abs(change_percentage) < STABLE_CHANGE_PCT:
        return TrendDirection.STABLE
    if change_percentage > 0:
        return TrendDirection.UPWARD
    return TrendDirection.DOWNWARD


def compute_statistics(points: Sequence[PricePoint]) -> Statistics:
    """
    Calculate descriptive statistics for a price series

    Args:
        points: Price points in chronological order (only prices are used)

    Returns:
        Statistics value

    Raises:
        EmptyInputError: If the series has no points
    """
    if len(points) == 0:
        raise EmptyInputError("Price series cannot be empty")

    prices = prices_of(points)
    count = len(prices)

    min_price = min(prices)
    max_price = max(prices)

    # Rounding in the sum can push the mean one ulp outside [min, max]
    mean = min(max(ordered_mean(prices), min_price), max_price)
    median = calculate_median(prices)

    # Population variance (divide by N); exactly zero for a flat series
    if min_price == max_price:
        variance = 0.0
    else:
        variance = ordered_sum((price - mean) ** 2 for price in prices) / count
    standard_deviation = math.sqrt(variance)

    change_percentage = calculate_change_percentage(prices[0], prices[-1])

    return Statistics(
        mean=mean,
        median=median,
        standard_deviation=standard_deviation,
        variance=variance,
        min_price=min_price,
        max_price=max_price,
        price_range=max_price - min_price,
        volatility=calculate_volatility(standard_deviation, mean),
        trend=classify_change(change_percentage),
        trend_strength=trend_strength(prices),
        change_percentage=change_percentage,
    )
