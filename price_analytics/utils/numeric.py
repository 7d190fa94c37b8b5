"""Deterministic numeric primitives."""

from collections.abc import Iterable, Sequence


def ordered_sum(values: Iterable[float]) -> float:
    """
    Sum values strictly left to right without compensation.

    The builtin ``sum`` switched to compensated summation for floats in
    Python 3.12, so results would differ between interpreter versions.
    """
    total = 0.0
    for value in values:
        total += value
    return total


def ordered_mean(values: Sequence[float]) -> float:
    """Arithmetic mean using ordered_sum. Caller guarantees non-empty input."""
    return ordered_sum(values) / len(values)


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """
    Divide, returning ``fallback`` when the denominator is exactly zero.

    Examples:
        >>> safe_divide(10.0, 4.0)
        2.5
        >>> safe_divide(10.0, 0.0)
        0.0
    """
    if denominator == 0:
        return fallback
    return numerator / denominator
