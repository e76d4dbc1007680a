"""
Service for today's PVPC price operations.

Failure policy: whenever the REE repository reports that today's prices
could not be fetched, this service substitutes the static
``FALLBACK_PRICES`` series and logs a warning. Callers therefore always
receive a usable, classified 24-hour series; ``ClassifiedSeries.is_fallback``
(and the ``is_fallback`` field of the API responses) tells the two apart.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence

import pandas as pd

from .base_service import BaseService
from .price_classifier import EmptyPriceSeriesError, classify_prices
from ..config import app_config
from ..repositories import REEPriceRepository
from ..models import (
    PriceRecord,
    ClassifiedSeries,
    DailyPriceSummary,
    TodayPricesResponse,
    CurrentPriceResponse
)
from ..utils.time_utils import (
    format_display_date,
    format_hour_range,
    region_current_hour,
    region_today
)

# Typical PVPC day in €/kWh, hours 00-01 through 23-24
FALLBACK_PRICES = (
    0.12684, 0.12231, 0.1185, 0.1152, 0.1121, 0.11045, 0.1159, 0.1284, 0.1452,
    0.1581, 0.1623, 0.1554, 0.1421, 0.1385, 0.1352, 0.1389, 0.1484, 0.1652,
    0.1854, 0.1921, 0.1885, 0.1752, 0.1584, 0.1382,
)


class PriceService(BaseService):
    """Service for fetching, classifying and looking up today's prices."""

    def __init__(self, repository: REEPriceRepository = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or REEPriceRepository())
        self.pricing = app_config.pricing

    def close(self) -> None:
        """Release the repository's HTTP resources."""
        self.repository.close()

    def validate_input(self, **kwargs) -> bool:
        """Validate that a lookup has records to work on."""
        records = kwargs.get('records')

        if records is not None and len(records) == 0:
            raise EmptyPriceSeriesError("Price series is empty")

        return True

    def _new_record(self, day: date, hour: int, price: float) -> PriceRecord:
        """Create a provisional, unclassified record."""
        return PriceRecord(
            date=format_display_date(day),
            hour=format_hour_range(hour),
            price=price,
            units=self.pricing.units,
            market=self.pricing.market
        )

    def build_records(self, df: pd.DataFrame, day: date) -> List[PriceRecord]:
        """
        Convert raw REE samples into provisional records.

        Prices arrive in €/MWh and are converted to €/kWh. Records keep the
        order in which the source delivered them.
        """
        records = []
        for _, row in df.iterrows():
            price_kwh = float(row['value']) / self.pricing.mwh_to_kwh_divisor
            records.append(self._new_record(day, int(row['hour']), price_kwh))
        return records

    def build_fallback_records(self, day: date) -> List[PriceRecord]:
        """Create the provisional records of the static fallback series."""
        return [
            self._new_record(day, hour, price)
            for hour, price in enumerate(FALLBACK_PRICES)
        ]

    def get_today_series(self, now: Optional[datetime] = None) -> ClassifiedSeries:
        """
        Fetch and classify today's prices, falling back to static data.

        Args:
            now: Moment defining "today"; the system clock when omitted

        Returns:
            ClassifiedSeries with the day's records, mean and low threshold
        """
        day = region_today(now)
        df = self.repository.find_by_date(day)

        is_fallback = df is None
        if is_fallback:
            self.logger.warning(
                f"⚠️ REE API unavailable for {day}, using static fallback prices")
            records = self.build_fallback_records(day)
        else:
            records = self.build_records(df, day)
            self.logger.info(f"✅ Fetched {len(records)} hourly prices for {day}")

        classified, average, low_threshold = classify_prices(records)
        return ClassifiedSeries(
            records=classified,
            average_price=average,
            low_threshold=low_threshold,
            is_fallback=is_fallback
        )

    def fetch_today_prices(self, now: Optional[datetime] = None) -> List[PriceRecord]:
        """Today's classified hourly records (fallback series if REE is down)."""
        return self.get_today_series(now).records

    def current_price(self, series: Sequence[PriceRecord], now: Optional[datetime] = None) -> PriceRecord:
        """
        Find the record of the current hour in the region.

        Falls back to the first record when no hour label matches, e.g. on
        a short or malformed series.

        Raises:
            EmptyPriceSeriesError: If the series has no records at all
        """
        self.validate_input(records=series)

        hour_label = format_hour_range(region_current_hour(now))
        for record in series:
            if record.hour == hour_label:
                return record

        self.logger.debug(
            f"No price for hour {hour_label}, using first record {series[0].hour}")
        return series[0]

    def get_today_prices(self, now: Optional[datetime] = None) -> TodayPricesResponse:
        """Get today's prices with classification figures."""
        try:
            series = self.get_today_series(now)
            return TodayPricesResponse(
                date=format_display_date(region_today(now)),
                market=self.pricing.market,
                units=self.pricing.units,
                is_fallback=series.is_fallback,
                average_price=series.average_price,
                low_threshold=series.low_threshold,
                count=len(series.records),
                prices=series.records
            )
        except Exception as e:
            self.handle_exception(e, "Error retrieving today's prices")

    def get_current_price(self, now: Optional[datetime] = None) -> CurrentPriceResponse:
        """Get the price that applies right now."""
        try:
            series = self.get_today_series(now)
            return CurrentPriceResponse(
                hour=format_hour_range(region_current_hour(now)),
                is_fallback=series.is_fallback,
                current_price=self.current_price(series.records, now)
            )
        except Exception as e:
            self.handle_exception(e, "Error retrieving current price")

    def get_daily_summary(self, now: Optional[datetime] = None) -> DailyPriceSummary:
        """Get min/max/average figures and cheap-hour counts for today."""
        try:
            series = self.get_today_series(now)
            records = series.records
            self.validate_input(records=records)

            cheapest = min(records, key=lambda record: record.price)
            priciest = max(records, key=lambda record: record.price)

            return DailyPriceSummary(
                date=format_display_date(region_today(now)),
                market=self.pricing.market,
                units=self.pricing.units,
                min_price=cheapest.price,
                min_price_hour=cheapest.hour,
                max_price=priciest.price,
                max_price_hour=priciest.hour,
                average_price=series.average_price,
                low_threshold=series.low_threshold,
                cheap_hours=sum(1 for record in records if record.is_cheap),
                under_average_hours=sum(
                    1 for record in records if record.is_under_avg),
                current_hour=self.current_price(records, now).hour,
                is_fallback=series.is_fallback
            )
        except Exception as e:
            self.handle_exception(e, "Error building daily price summary")
