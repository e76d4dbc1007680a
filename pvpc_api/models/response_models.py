"""
Response models for API endpoints.
"""

from pydantic import BaseModel
from typing import List
from .price_models import PriceRecord, MonthlyAverage


class TodayPricesResponse(BaseModel):
    """Model for today's prices response."""
    date: str
    market: str
    units: str
    is_fallback: bool
    average_price: float
    low_threshold: float
    count: int
    prices: List[PriceRecord]


class CurrentPriceResponse(BaseModel):
    """Model for the price of the current hour."""
    hour: str
    is_fallback: bool
    current_price: PriceRecord


class MonthlyPricesResponse(BaseModel):
    """Model for historical monthly averages response."""
    monthly_prices: List[MonthlyAverage]
    count: int


class APIInfo(BaseModel):
    """Model for API information."""
    message: str
    version: str
    endpoints: dict


class HealthResponse(BaseModel):
    """Model for health check response."""
    status: str
    service: str
