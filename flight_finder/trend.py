"""Altitude trend classification."""

from enum import Enum
from typing import Sequence

import numpy as np

from .constants import TREND_DECREASE_RATIO

__all__ = ["Trend", "classify_trend"]


class Trend(Enum):
    """Dominant direction of an altitude sample."""

    INCREASE = "increase"
    DECREASE = "decrease"
    # Only held before the first sample has been classified
    UNKNOWN = "unknown"


def classify_trend(values: Sequence[float]) -> Trend:
    """
    Guess whether a sequence of altitudes is rising or falling.

    Every adjacent pair is compared. The sample is a descent only when the
    number of falling pairs is strictly greater than half the pair count
    (rounded down), so an even split counts as a climb.

    Args:
        values: Altitudes in chronological order, at least two

    Returns:
        Trend.DECREASE or Trend.INCREASE, never Trend.UNKNOWN

    Raises:
        ValueError: If fewer than two values are given

    Example:
        >>> classify_trend([4, 3, 2, 1])
        <Trend.DECREASE: 'decrease'>
        >>> classify_trend([1, 3, 2, 4])
        <Trend.INCREASE: 'increase'>
    """
    altitudes = np.asarray(values, dtype=float)
    if altitudes.size < 2:
        raise ValueError(f"Trend needs at least 2 values, got {altitudes.size}")

    pair_count = altitudes.size - 1
    threshold = int(pair_count * TREND_DECREASE_RATIO)
    decreasing_pairs = int(np.count_nonzero(altitudes[:-1] > altitudes[1:]))

    return Trend.DECREASE if decreasing_pairs > threshold else Trend.INCREASE
