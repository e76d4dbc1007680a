"""
PVPC Electricity Price API.

Today's hourly Spanish PVPC prices from Red Eléctrica de España, with
cheap-hour detection, current-hour lookup and Plotly charts.
"""

__version__ = "1.0.0"
