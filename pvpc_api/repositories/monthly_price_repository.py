"""
Repository for historical monthly average PVPC prices.

The table is fixed reference data. It stands in for a future REE query
with ``time_trunc=month`` against the same endpoint.
"""

from typing import List, Tuple

from .base_repository import BaseRepository

# (month label, average price in €/kWh), oldest first
MONTHLY_AVERAGE_PRICES: Tuple[Tuple[str, float], ...] = (
    ("Feb 25", 0.1757),
    ("Mar 25", 0.1231),
    ("Abr 25", 0.1085),
    ("May 25", 0.1132),
    ("Jun 25", 0.1341),
    ("Jul 25", 0.1372),
    ("Ago 25", 0.1334),
    ("Sep 25", 0.1381),
    ("Oct 25", 0.1465),
    ("Nov 25", 0.1356),
    ("Dic 25", 0.1478),
    ("Ene 26", 0.1392),
    ("Feb 26", 0.1184),
)


class MonthlyPriceRepository(BaseRepository):
    """Repository for the static monthly averages table."""

    def find_all(self) -> List[Tuple[str, float]]:
        """Find all monthly averages in chronological order."""
        return list(MONTHLY_AVERAGE_PRICES)

    def count(self) -> int:
        """Count monthly entries."""
        return len(MONTHLY_AVERAGE_PRICES)
