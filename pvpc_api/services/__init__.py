"""
Services package for business logic layer.
Imports all services for easy access.
"""

# Base service
from .base_service import BaseService

# Classification helpers
from .price_classifier import (
    EmptyPriceSeriesError,
    classify_prices,
    compute_average,
    compute_low_threshold
)

# Individual services
from .price_service import PriceService, FALLBACK_PRICES
from .monthly_price_service import MonthlyPriceService

__all__ = [
    # Base service
    "BaseService",

    # Classification helpers
    "EmptyPriceSeriesError",
    "classify_prices",
    "compute_average",
    "compute_low_threshold",

    # Individual services
    "PriceService",
    "MonthlyPriceService",
    "FALLBACK_PRICES"
]
