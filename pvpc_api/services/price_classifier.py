"""
Cheap / under-average classification of a day's hourly prices.

An hour is *cheap* when its price is at or below the nearest-rank low
percentile of the day (no interpolation, so every hour tied with the
threshold is cheap) and *under average* when it is strictly below the
arithmetic mean. The two flags are independent.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np

from ..config import app_config
from ..models import PriceRecord


class EmptyPriceSeriesError(ValueError):
    """Raised when an operation needs at least one price record."""


def compute_average(prices: Sequence[float]) -> float:
    """Arithmetic mean of the prices."""
    if len(prices) == 0:
        raise EmptyPriceSeriesError("Cannot average an empty price series")
    return float(np.mean(np.asarray(prices, dtype=float)))


def compute_low_threshold(prices: Sequence[float], percentile: float = None) -> float:
    """
    Nearest-rank percentile of the prices.

    Args:
        prices: Prices in any order
        percentile: Fraction in [0, 1), defaults to the configured cheap percentile

    Returns:
        The value at index ``floor(percentile * n)`` of the ascending prices
    """
    if len(prices) == 0:
        raise EmptyPriceSeriesError("Cannot take a percentile of an empty price series")
    if percentile is None:
        percentile = app_config.pricing.cheap_percentile

    ordered = np.sort(np.asarray(prices, dtype=float))
    index = min(math.floor(percentile * len(ordered)), len(ordered) - 1)
    return float(ordered[index])


def classify_prices(records: Sequence[PriceRecord]) -> Tuple[List[PriceRecord], float, float]:
    """
    Tag every record as cheap and/or under average.

    Records are immutable, so classified copies are returned and the input
    is left untouched. Classifying an already classified series gives the
    same flags again.

    Returns:
        Tuple of (classified records, average price, low threshold)

    Raises:
        EmptyPriceSeriesError: If there are no records
    """
    prices = [record.price for record in records]
    average = compute_average(prices)
    low_threshold = compute_low_threshold(prices)

    classified = [
        record.model_copy(update={
            'is_cheap': record.price <= low_threshold,
            'is_under_avg': record.price < average,
        })
        for record in records
    ]
    return classified, average, low_threshold
