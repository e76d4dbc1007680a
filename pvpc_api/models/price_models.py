"""
Domain models for PVPC electricity price data.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class PriceRecord(BaseModel):
    """Model for one hour of today's price series."""
    model_config = ConfigDict(frozen=True)

    date: str  # display date of today in Madrid, e.g. "19/10/2026"
    hour: str  # half-open hour range, e.g. "00-01" ... "23-24"
    price: float  # consumer price in €/kWh
    units: str
    market: str
    is_cheap: bool = False
    is_under_avg: bool = False


class MonthlyAverage(BaseModel):
    """Model for a historical monthly average price."""
    model_config = ConfigDict(frozen=True)

    month: str
    price: float  # €/kWh


class ClassifiedSeries(BaseModel):
    """A day's records together with the figures used to classify them."""
    model_config = ConfigDict(frozen=True)

    records: List[PriceRecord]
    average_price: float
    low_threshold: float
    is_fallback: bool = False


class DailyPriceSummary(BaseModel):
    """Model for the headline figures of today's prices."""
    date: str
    market: str
    units: str
    min_price: float
    min_price_hour: str
    max_price: float
    max_price_hour: str
    average_price: float
    low_threshold: float
    cheap_hours: int
    under_average_hours: int
    current_hour: Optional[str] = None
    is_fallback: bool
