"""
Utility functions module.

Numeric helpers shared by the analytics components. All reductions here are
plain left-to-right accumulations so repeated runs over the same input give
bit-identical floats.
"""

from .numeric import ordered_mean, ordered_sum, safe_divide

__all__ = ["ordered_sum", "ordered_mean", "safe_divide"]
