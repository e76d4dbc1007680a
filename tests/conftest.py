"""
Shared fixtures: REE payload builders and a stand-in requests session.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
import pytz
import requests

from pvpc_api.repositories import REEPriceRepository
from pvpc_api.services import PriceService, FALLBACK_PRICES

# 10:30 UTC on 19 Oct 2026 is 12:30 in Madrid (CEST, UTC+2)
NOW = pytz.utc.localize(datetime(2026, 10, 19, 10, 30))

# REE publishes €/MWh
SAMPLE_MWH_PRICES = [price * 1000 for price in FALLBACK_PRICES]


def build_ree_payload(values_mwh, day="2026-10-19", offset="+02:00"):
    """Build an REE apidatos envelope holding one hourly series."""
    return {
        "data": {"type": "Precios mercado peninsular en tiempo real"},
        "included": [
            {
                "type": "PVPC (€/MWh)",
                "id": "1001",
                "attributes": {
                    "title": "PVPC (€/MWh)",
                    "values": [
                        {
                            "value": value,
                            "percentage": 1,
                            "datetime": f"{day}T{hour:02d}:00:00.000{offset}",
                        }
                        for hour, value in enumerate(values_mwh)
                    ],
                },
            },
            {
                "type": "Precio mercado spot (€/MWh)",
                "id": "600",
                "attributes": {"values": []},
            },
        ],
    }


def make_response(payload=None, status_code=200, json_error=None):
    """Create a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(response=None, error=None):
    """Create a fake requests.Session whose get() returns `response` or raises `error`."""
    session = MagicMock()
    session.headers = {}
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session


@pytest.fixture
def ree_payload():
    return build_ree_payload(SAMPLE_MWH_PRICES)


@pytest.fixture
def live_session(ree_payload):
    return make_session(make_response(ree_payload))


@pytest.fixture
def failing_session():
    return make_session(error=requests.ConnectionError("network unreachable"))


@pytest.fixture
def live_service(live_session):
    return PriceService(REEPriceRepository(session=live_session))


@pytest.fixture
def fallback_service(failing_session):
    return PriceService(REEPriceRepository(session=failing_session))
