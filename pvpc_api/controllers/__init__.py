"""
Controllers package for API endpoint handlers.
Imports all controllers for easy access.
"""

from fastapi import APIRouter

# Base controller
from .base_controller import BaseController

# Individual controllers
from .info_controller import InfoController
from .price_controller import PriceController, get_price_service, get_monthly_price_service
from .chart_controller import ChartController, ChartFormat


class PVPCPriceController:
    """Aggregate controller that combines all PVPC price controllers."""

    def __init__(self):
        """Initialize aggregate controller with all sub-controllers."""
        self.router = APIRouter()

        self.info_controller = InfoController()
        self.price_controller = PriceController()
        self.chart_controller = ChartController()

        self._setup_aggregate_routes()

    def _setup_aggregate_routes(self):
        """Setup aggregate routes by including all controller routers."""
        self.router.include_router(self.info_controller.router)
        self.router.include_router(self.price_controller.router)
        self.router.include_router(self.chart_controller.router)


# Create aggregate controller used by the application
pvpc_controller = PVPCPriceController()

__all__ = [
    # Base controller
    "BaseController",

    # Individual controllers
    "InfoController",
    "PriceController",
    "ChartController",
    "ChartFormat",

    # Aggregate controller
    "PVPCPriceController",
    "pvpc_controller",

    # Dependencies
    "get_price_service",
    "get_monthly_price_service"
]
