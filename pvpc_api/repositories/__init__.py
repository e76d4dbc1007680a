"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .ree_price_repository import REEPriceRepository
from .monthly_price_repository import MonthlyPriceRepository, MONTHLY_AVERAGE_PRICES

__all__ = [
    "BaseRepository",
    "REEPriceRepository",
    "MonthlyPriceRepository",
    "MONTHLY_AVERAGE_PRICES"
]
