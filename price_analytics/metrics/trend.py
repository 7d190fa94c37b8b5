"""Step-wise trend analysis: change statistics, inflection points and momentum"""

from collections.abc import Sequence

from ..data.models import PricePoint, prices_of
from ..models.analysis import Momentum, TrendAnalysis, TrendDirection
from ..utils.numeric import ordered_mean
from .regression import trend_strength

# Average step change below this fraction of the first price counts as stable
STABLE_STEP_FRACTION = 0.001

# Half-to-half strength difference below this is consistent momentum
MOMENTUM_THRESHOLD = 0.1


def calculate_changes(prices: Sequence[float]) -> list[float]:
    """Differences between consecutive prices (n-1 values)."""
    return [prices[i + 1] - prices[i] for i in range(len(prices) - 1)]


def find_inflection_points(changes: Sequence[float]) -> list[int]:
    """
    Find price indices where consecutive changes reverse sign

    Pairs (changes[i], changes[i+1]) are scanned from i = 1, so a reversal
    between the first two changes is not reported. A zero change never
    counts as a reversal.

    Args:
        changes: Step changes from calculate_changes

    Returns:
        Ascending price-series indices (i + 1 for each reversing pair)
    """
    points = []
    for i in range(1, len(changes) - 1):
        current = changes[i]
        following = changes[i + 1]
        if (current > 0 and following < 0) or (current < 0 and following > 0):
            points.append(i + 1)
    return points


def classify_momentum(prices: Sequence[float]) -> Momentum:
    """
    Compare trend strength of the second half against the first half

    The split is at n // 2; each half is indexed from zero on its own.
    """
    mid_point = len(prices) // 2
    first_half = trend_strength(prices[:mid_point])
    second_half = trend_strength(prices[mid_point:])

    momentum_diff = second_half - first_half
    if abs(momentum_diff) < MOMENTUM_THRESHOLD:
        return Momentum.CONSISTENT
    if momentum_diff > 0:
        return Momentum.ACCELERATING
    return Momentum.DECELERATING


def analyze_trend(points: Sequence[PricePoint]) -> TrendAnalysis:
    """
    Perform step-wise trend analysis

    Series with fewer than two points have no steps and get the neutral
    result rather than an error.

    Args:
        points: Price points in chronological order

    Returns:
        TrendAnalysis value
    """
    if len(points) < 2:
        return TrendAnalysis.neutral()

    prices = prices_of(points)
    changes = calculate_changes(prices)

    average_change = ordered_mean(changes)
    max_increase = max((c for c in changes if c > 0), default=0.0)
    max_decrease = min((c for c in changes if c < 0), default=0.0)

    if abs(average_change) < prices[0] * STABLE_STEP_FRACTION:
        overall_trend = TrendDirection.STABLE
    elif average_change > 0:
        overall_trend = TrendDirection.UPWARD
    else:
        overall_trend = TrendDirection.DOWNWARD

    return TrendAnalysis(
        overall_trend=overall_trend,
        trend_strength=trend_strength(prices),
        average_change=average_change,
        max_increase=max_increase,
        max_decrease=max_decrease,
        inflection_points=tuple(find_inflection_points(changes)),
        momentum=classify_momentum(prices),
    )
