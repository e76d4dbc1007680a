"""
Chart package for price visualizations.
"""

from .price_chart import (
    build_price_chart,
    chart_mean,
    figure_to_html,
    figure_to_json,
    monthly_chart_points,
    price_chart_points,
)

__all__ = [
    "build_price_chart",
    "chart_mean",
    "figure_to_html",
    "figure_to_json",
    "monthly_chart_points",
    "price_chart_points",
]
