"""
Controller for chart endpoints.

Charts are returned either as Plotly figure JSON (for a front end that
embeds plotly.js) or as a standalone HTML page.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from fastapi import Query, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response

from .base_controller import BaseController
from .price_controller import AT_DESCRIPTION, get_price_service, get_monthly_price_service
from ..charts import (
    build_price_chart,
    figure_to_html,
    figure_to_json,
    monthly_chart_points,
    price_chart_points
)
from ..services import PriceService, MonthlyPriceService
from ..utils.time_utils import region_current_hour


class ChartFormat(str, Enum):
    JSON = "json"
    HTML = "html"


def render_figure(fig, output_format: ChartFormat) -> Response:
    """Wrap a figure in the response matching the requested format."""
    if output_format == ChartFormat.HTML:
        return HTMLResponse(content=figure_to_html(fig))
    return Response(content=figure_to_json(fig), media_type="application/json")


class ChartController(BaseController):
    """Controller for price chart endpoints."""

    def _setup_routes(self):
        """Setup routes for chart rendering."""

        @self.router.get(
            "/charts/today",
            tags=["Charts"],
            summary="Area chart of today's prices",
            description="""
            Smoothed area chart of today's hourly prices with a dashed line at
            the day's mean and a vertical marker at the current hour in Spain.
            """
        )
        async def get_today_chart(
            format: ChartFormat = Query(ChartFormat.JSON, description="Output format: json or html"),
            at: Optional[datetime] = Query(None, description=AT_DESCRIPTION),
            service: PriceService = Depends(get_price_service)
        ):
            """Render today's prices."""
            try:
                # REE fetch blocks, keep it off the event loop
                series = await run_in_threadpool(service.get_today_series, now=at)
                fig = build_price_chart(
                    price_chart_points(series.records),
                    current_hour=region_current_hour(at),
                    title="Precio PVPC hoy" + (" (datos de respaldo)" if series.is_fallback else "")
                )
                return render_figure(fig, format)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error rendering today's chart")

        @self.router.get(
            "/charts/monthly",
            tags=["Charts"],
            summary="Chart of monthly average prices"
        )
        async def get_monthly_chart(
            format: ChartFormat = Query(ChartFormat.JSON, description="Output format: json or html"),
            service: MonthlyPriceService = Depends(get_monthly_price_service)
        ):
            """Render the monthly averages."""
            try:
                fig = build_price_chart(
                    monthly_chart_points(service.monthly_averages()),
                    name_key="month",
                    title="Precio medio mensual"
                )
                return render_figure(fig, format)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error rendering monthly chart")
