"""Regression-based trend strength shared by the statistics and trend analytics"""

import math
from collections.abc import Sequence


def trend_strength(values: Sequence[float]) -> float:
    """
    Calculate trend strength as the absolute Pearson correlation between
    time index and value

    With x = 0..n-1:
    r = (nΣxy - ΣxΣy) / sqrt((nΣx² - (Σx)²)(nΣy² - (Σy)²))

    Args:
        values: Values in time order; index position is the time step

    Returns:
        |r| clamped to [0, 1]; 0 for fewer than two values or a flat series
    """
    n = len(values)
    if n < 2:
        return 0.0

    # A flat series has no trend; rounding in the sums would otherwise leave noise
    if min(values) == max(values):
        return 0.0

    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_xx = 0.0
    sum_yy = 0.0
    for x, y in enumerate(values):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x
        sum_yy += y * y

    numerator = n * sum_xy - sum_x * sum_y
    radicand = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)

    # Rounding on near-flat input can push the radicand slightly negative
    if radicand <= 0:
        return 0.0

    r = numerator / math.sqrt(radicand)
    return min(abs(r), 1.0)
