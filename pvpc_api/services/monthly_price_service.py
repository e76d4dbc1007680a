"""
Service for historical monthly average prices.
"""

from typing import List

from .base_service import BaseService
from ..repositories import MonthlyPriceRepository
from ..models import MonthlyAverage, MonthlyPricesResponse


class MonthlyPriceService(BaseService):
    """Service for the monthly averages table."""

    def __init__(self, repository: MonthlyPriceRepository = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or MonthlyPriceRepository())

    def validate_input(self, **kwargs) -> bool:
        """Monthly averages take no input."""
        return True

    def monthly_averages(self) -> List[MonthlyAverage]:
        """Return the 13 monthly averages, oldest first."""
        return [
            MonthlyAverage(month=month, price=price)
            for month, price in self.repository.find_all()
        ]

    def get_monthly_prices(self) -> MonthlyPricesResponse:
        """Get monthly averages wrapped for the API."""
        try:
            averages = self.monthly_averages()
            return MonthlyPricesResponse(
                monthly_prices=averages,
                count=len(averages)
            )
        except Exception as e:
            self.handle_exception(e, "Error retrieving monthly prices")
