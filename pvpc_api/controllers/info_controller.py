"""
Controller for API information and health endpoints.
"""

from .base_controller import BaseController
from ..config import app_config
from ..models import APIInfo, HealthResponse


class InfoController(BaseController):
    """Controller for API information and health endpoints."""

    def _setup_routes(self):
        """Setup routes for API info and health."""

        @self.router.get("/", response_model=APIInfo, tags=["System Information"])
        async def get_api_info():
            """API root endpoint with basic information."""
            return APIInfo(
                message="PVPC Electricity Price API",
                version=app_config.api.version,
                endpoints={
                    "today_prices": "/prices/today - Today's hourly prices with cheap/under-average flags",
                    "current_price": "/prices/current - Price of the current hour in Spain",
                    "summary": "/prices/summary - Today's min/max/average figures",
                    "monthly_prices": "/prices/monthly - Historical monthly averages",
                    "today_chart": "/charts/today - Area chart of today's prices",
                    "monthly_chart": "/charts/monthly - Chart of monthly averages",
                    "health": "/health - Health check"
                }
            )

        @self.router.get("/health", response_model=HealthResponse, tags=["System Information"])
        async def health_check():
            """Health check endpoint."""
            return HealthResponse(
                status="healthy",
                service="pvpc-price-api"
            )
