"""Percentile calculations over collected file sizes.

Interpolation follows numpy's default ``linear`` method: the value at
fractional index ``(n - 1) * p`` of the sorted input, interpolated between
the two bracketing order statistics.
"""
from typing import Sequence

import numpy as np


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """Return the interpolated percentile ``p`` (a fraction in [0, 1])."""
    if len(sorted_values) == 0:
        return 0.0
    p = min(max(p, 0.0), 1.0)
    return float(np.percentile(sorted_values, p * 100))


def median(sorted_values: Sequence[float]) -> float:
    return percentile(sorted_values, 0.5)
