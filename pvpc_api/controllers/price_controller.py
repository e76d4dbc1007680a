"""
Controller for PVPC price endpoints.

Endpoints:
    - GET /prices/today: Today's hourly prices with cheap/under-average flags
    - GET /prices/current: Price of the current hour in Spain
    - GET /prices/summary: Headline figures for today
    - GET /prices/monthly: Historical monthly averages

Every daily endpoint accepts an optional ``at`` timestamp that replaces
the system clock, which makes past days and hours reproducible.
"""

from datetime import datetime
from typing import Iterator, Optional

from fastapi import Query, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool

from .base_controller import BaseController
from ..services import PriceService, MonthlyPriceService
from ..models import (
    TodayPricesResponse,
    CurrentPriceResponse,
    DailyPriceSummary,
    MonthlyPricesResponse
)

AT_DESCRIPTION = "ISO 8601 moment used instead of the current time (naive values are read as UTC)"


def get_price_service() -> Iterator[PriceService]:
    """Dependency injection for PriceService, closing its HTTP session after the request."""
    service = PriceService()
    try:
        yield service
    finally:
        service.close()


def get_monthly_price_service() -> MonthlyPriceService:
    """Dependency injection for MonthlyPriceService."""
    return MonthlyPriceService()


class PriceController(BaseController):
    """Controller for price data endpoints."""

    def _setup_routes(self):
        """Setup routes for price data operations."""

        @self.router.get(
            "/prices/today",
            response_model=TodayPricesResponse,
            tags=["Price Data"],
            summary="Get today's hourly PVPC prices",
            description="""
            Retrieve today's 24 hourly PVPC prices (€/kWh) from Red Eléctrica de España.

            **Classification:**
            - **is_cheap**: price at or below the day's 33rd percentile (nearest rank)
            - **is_under_avg**: price strictly below the day's mean

            When the REE API cannot be reached a static reference day is
            returned instead and `is_fallback` is true.
            """,
            response_description="Today's classified hourly prices"
        )
        async def get_today_prices(
            at: Optional[datetime] = Query(None, description=AT_DESCRIPTION),
            service: PriceService = Depends(get_price_service)
        ):
            """Get today's classified hourly prices."""
            try:
                return await run_in_threadpool(service.get_today_prices, now=at)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving today's prices")

        @self.router.get(
            "/prices/current",
            response_model=CurrentPriceResponse,
            tags=["Price Data"],
            summary="Get the price of the current hour",
            description="""
            Look up the record whose hour range contains the current time in
            Spain (Europe/Madrid). If no record matches, the first hour of
            the day is returned.
            """
        )
        async def get_current_price(
            at: Optional[datetime] = Query(None, description=AT_DESCRIPTION),
            service: PriceService = Depends(get_price_service)
        ):
            """Get the price that applies right now."""
            try:
                return await run_in_threadpool(service.get_current_price, now=at)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving current price")

        @self.router.get(
            "/prices/summary",
            response_model=DailyPriceSummary,
            tags=["Statistics & Analytics"],
            summary="Get today's price summary"
        )
        async def get_daily_summary(
            at: Optional[datetime] = Query(None, description=AT_DESCRIPTION),
            service: PriceService = Depends(get_price_service)
        ):
            """Get min/max/average figures and cheap-hour counts for today."""
            try:
                return await run_in_threadpool(service.get_daily_summary, now=at)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving price summary")

        @self.router.get(
            "/prices/monthly",
            response_model=MonthlyPricesResponse,
            tags=["Statistics & Analytics"],
            summary="Get historical monthly average prices"
        )
        async def get_monthly_prices(
            service: MonthlyPriceService = Depends(get_monthly_price_service)
        ):
            """Get the 13 most recent monthly averages, oldest first."""
            try:
                return service.get_monthly_prices()
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving monthly prices")
