"""
Repository for hourly price samples published by Red Eléctrica de España.

Wraps the public REE apidatos "precios-mercados-tiempo-real" endpoint.
Docs: https://www.ree.es/es/datos/apidatos

A failed fetch is reported as ``None``. Transport errors, non-success
status codes and payloads without the expected
``included[0].attributes.values`` series all collapse into that single
outcome; deciding what to show instead is left to the service layer.
"""

import logging
from datetime import date, datetime
from typing import Optional

import pandas as pd
import requests

from .base_repository import BaseRepository
from ..config import app_config
from ..utils.time_utils import REGION_TIMEZONE, build_query_window, region_today


class REEPriceRepository(BaseRepository):
    """Repository for raw REE hourly price samples."""

    def __init__(self, session: requests.Session = None):
        """
        Initialize the repository.

        Args:
            session: Optional requests session, a new one is created when omitted
        """
        self.logger = logging.getLogger(__name__)
        self.config = app_config.ree

        self.session = session or requests.Session()
        self.session.headers.update(self.config.headers)

    def build_params(self, day: date) -> dict:
        """Build the query string parameters for one day of hourly prices."""
        start_date, end_date = build_query_window(day)
        return {
            'start_date': start_date,
            'end_date': end_date,
            'time_trunc': self.config.time_trunc,
            'geo_trunc': self.config.geo_trunc,
            'geo_limit': self.config.geo_limit,
            'geo_ids': self.config.geo_ids,
        }

    def find_all(self, now: Optional[datetime] = None) -> Optional[pd.DataFrame]:
        """Find the samples of the region's current day at `now`."""
        return self.find_by_date(region_today(now))

    def close(self) -> None:
        """Release the pooled connections of the HTTP session."""
        self.session.close()

    def find_by_date(self, day: date) -> Optional[pd.DataFrame]:
        """
        Fetch the hourly samples of one day.

        Args:
            day: Calendar date in the region timezone

        Returns:
            DataFrame with columns ``datetime`` (region-local, tz-aware),
            ``hour`` and ``value`` (€/MWh) in delivery order, or None if
            the fetch failed
        """
        payload = self._fetch_payload(day)
        if payload is None:
            return None

        try:
            return self.parse_values(payload)
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            self.logger.error(f"❌ Unexpected REE payload shape for {day}: {e}")
            return None

    def _fetch_payload(self, day: date) -> Optional[dict]:
        """Issue the GET request and decode the JSON envelope."""
        params = self.build_params(day)
        try:
            self.logger.info(
                f"Fetching REE hourly prices {params['start_date']} - {params['end_date']}")
            response = self.session.get(
                self.config.base_url,
                params=params,
                timeout=self.config.request_timeout
            )
            if not response.ok:
                self.logger.error(f"❌ REE API error: {response.status_code}")
                return None
            return response.json()

        except requests.RequestException as e:
            self.logger.error(f"❌ Error fetching REE prices: {e}")
            return None
        except ValueError as e:
            self.logger.error(f"❌ REE API returned invalid JSON: {e}")
            return None

    @staticmethod
    def parse_values(payload: dict) -> pd.DataFrame:
        """
        Extract the price series from an REE response envelope.

        The first included indicator is the PVPC spot series; its
        ``attributes.values`` holds ``{value, datetime}`` pairs.

        Raises:
            KeyError, IndexError, TypeError, AttributeError, ValueError: If the payload does
                not carry a non-empty, well-formed series
        """
        included = payload.get('included') or []
        if not included:
            raise ValueError("No data in REE API response")

        values = included[0]['attributes']['values']
        if not values:
            raise ValueError("REE API response holds an empty price series")

        df = pd.DataFrame(values, columns=['datetime', 'value'])
        if df['value'].isna().any() or df['datetime'].isna().any():
            raise ValueError("REE price series contains incomplete samples")

        df['datetime'] = pd.to_datetime(
            df['datetime'], utc=True).dt.tz_convert(REGION_TIMEZONE)
        df['hour'] = df['datetime'].dt.hour
        df['value'] = df['value'].astype(float)

        return df[['datetime', 'hour', 'value']]
