"""
Models package for API data structures.
Imports all models for easy access.
"""

# Price models
from .price_models import PriceRecord, MonthlyAverage, ClassifiedSeries, DailyPriceSummary

# Response models
from .response_models import (
    TodayPricesResponse,
    CurrentPriceResponse,
    MonthlyPricesResponse,
    APIInfo,
    HealthResponse
)

__all__ = [
    # Price models
    "PriceRecord",
    "MonthlyAverage",
    "ClassifiedSeries",
    "DailyPriceSummary",

    # Response models
    "TodayPricesResponse",
    "CurrentPriceResponse",
    "MonthlyPricesResponse",
    "APIInfo",
    "HealthResponse"
]
