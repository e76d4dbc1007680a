"""
Interactive price charts built with Plotly.

``build_price_chart`` is a pure function of the points it receives: it
does no I/O and derives its own mean reference line from the data on every
call. Points are plain mappings keyed by caller-chosen field names, so the
same chart serves the hourly series (``name``/``price``) and the monthly
table (``month``/``price``).
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from ..config import app_config
from ..models import MonthlyAverage, PriceRecord

PRICE_COLOR = "#f59e0b"
PRICE_FILL = "rgba(245, 158, 11, 0.2)"
MEAN_LINE_COLOR = "#cbd5e1"
NOW_LINE_COLOR = "#0f172a"
AXIS_TICK_COLOR = "#94a3b8"
GRID_COLOR = "#f1f5f9"

# Show one x label out of every three
X_LABEL_STEP = 3


def price_chart_points(records: Sequence[PriceRecord]) -> List[Dict[str, Any]]:
    """Map hourly records to chart points named by their starting hour ("00".."23")."""
    return [
        {"name": record.hour.split("-")[0], "price": record.price}
        for record in records
    ]


def monthly_chart_points(averages: Sequence[MonthlyAverage]) -> List[Dict[str, Any]]:
    """Map monthly averages to chart points keyed by ``month``."""
    return [{"month": average.month, "price": average.price} for average in averages]


def chart_mean(values: Sequence[Optional[float]]) -> Optional[float]:
    """
    Mean of the defined values.

    Missing values (None/NaN) are skipped; a price of exactly 0 still
    counts. Returns None when nothing is defined.
    """
    defined = [float(value) for value in values if pd.notna(value)]
    if not defined:
        return None
    return float(np.mean(defined))


def build_price_chart(
    data: Sequence[Mapping[str, Any]],
    data_key: str = "price",
    name_key: str = "name",
    current_hour: Optional[int] = None,
    title: Optional[str] = None
) -> go.Figure:
    """
    Build a smoothed area chart of prices.

    Args:
        data: Ordered chart points, each holding at least ``data_key`` and ``name_key``
        data_key: Field holding the price
        name_key: Field holding the x-axis label
        current_hour: Optional hour (0-23) marked with a vertical "Ahora" line
        title: Optional chart title

    Returns:
        plotly Figure with the area trace, a dashed "Media" line and the
        optional current-hour marker
    """
    units = app_config.pricing.units
    names = [point.get(name_key) for point in data]
    values = [point.get(data_key) for point in data]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=names,
        y=values,
        mode="lines",
        name="Precio",
        line=dict(color=PRICE_COLOR, width=2.5, shape="spline"),
        fill="tozeroy",
        fillcolor=PRICE_FILL,
        connectgaps=False,
        hovertemplate=f"<b>%{{x}}h</b><br>%{{y:.4f}} {units}<extra></extra>",
    ))

    average = chart_mean(values)
    if average is not None:
        fig.add_hline(
            y=average,
            line=dict(color=MEAN_LINE_COLOR, width=1, dash="dash"),
        )
        fig.add_annotation(
            x=1, xref="paper", y=average, yref="y",
            text="Media", showarrow=False, xanchor="right", yanchor="bottom",
            font=dict(color=AXIS_TICK_COLOR, size=9),
        )

    if current_hour is not None:
        marker = f"{current_hour:02d}"
        fig.add_vline(x=marker, line=dict(color=NOW_LINE_COLOR, width=2))
        fig.add_annotation(
            x=marker, xref="x", y=1, yref="paper",
            text="Ahora", showarrow=False, yanchor="bottom",
            font=dict(color=NOW_LINE_COLOR, size=9),
        )

    fig.update_xaxes(
        type="category",
        tickmode="array",
        tickvals=names[::X_LABEL_STEP],
        showgrid=False,
        showline=False,
        tickfont=dict(color=AXIS_TICK_COLOR, size=10),
    )
    fig.update_yaxes(
        tickformat=".3f",
        gridcolor=GRID_COLOR,
        griddash="dash",
        zeroline=False,
        tickfont=dict(color=AXIS_TICK_COLOR, size=10),
    )
    fig.update_layout(
        title=title,
        template="plotly_white",
        showlegend=False,
        height=320,
        margin=dict(l=40, r=10, t=30 if title is None else 50, b=30),
        hovermode="x",
    )
    return fig


def figure_to_json(fig: go.Figure) -> str:
    """Serialize a figure to Plotly JSON."""
    return fig.to_json()


def figure_to_html(fig: go.Figure) -> str:
    """Render a figure as a standalone HTML page loading plotly.js from the CDN."""
    return fig.to_html(full_html=True, include_plotlyjs="cdn")
