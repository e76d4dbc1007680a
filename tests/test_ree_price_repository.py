"""
Tests for the REE apidatos repository.
"""

from datetime import date, datetime

import pytest
import pytz
import requests

from pvpc_api.repositories import REEPriceRepository
from conftest import NOW, SAMPLE_MWH_PRICES, build_ree_payload, make_response, make_session

DAY = date(2026, 10, 19)


class TestRequest:
    def test_query_parameters(self, live_session):
        repository = REEPriceRepository(session=live_session)
        repository.find_by_date(DAY)

        _, kwargs = live_session.get.call_args
        assert kwargs["params"] == {
            "start_date": "2026-10-19T00:00",
            "end_date": "2026-10-19T23:59",
            "time_trunc": "hour",
            "geo_trunc": "electric_system",
            "geo_limit": "peninsular",
            "geo_ids": "8741",
        }

    def test_single_request_to_real_time_endpoint(self, live_session):
        REEPriceRepository(session=live_session).find_by_date(DAY)
        assert live_session.get.call_count == 1
        url = live_session.get.call_args[0][0]
        assert url == "https://apidatos.ree.es/es/datos/mercados/precios-mercados-tiempo-real"

    def test_json_headers_are_set(self, live_session):
        REEPriceRepository(session=live_session)
        assert live_session.headers["Accept"] == "application/json"


class TestParsing:
    def test_returns_one_row_per_hour_in_delivery_order(self, live_session):
        df = REEPriceRepository(session=live_session).find_by_date(DAY)
        assert list(df["hour"]) == list(range(24))
        assert list(df["value"]) == pytest.approx(SAMPLE_MWH_PRICES)

    def test_hours_are_local_to_madrid(self):
        # Same instants expressed in UTC still map to Madrid hours
        payload = build_ree_payload([100.0, 110.0], day="2026-10-18", offset="Z")
        payload["included"][0]["attributes"]["values"][0]["datetime"] = "2026-10-18T22:00:00.000Z"
        payload["included"][0]["attributes"]["values"][1]["datetime"] = "2026-10-18T23:00:00.000Z"
        df = REEPriceRepository.parse_values(payload)
        assert list(df["hour"]) == [0, 1]

    def test_mixed_offsets_on_dst_change(self):
        payload = build_ree_payload([90.0, 95.0])
        values = payload["included"][0]["attributes"]["values"]
        values[0]["datetime"] = "2026-10-25T02:00:00.000+02:00"
        values[1]["datetime"] = "2026-10-25T02:00:00.000+01:00"
        df = REEPriceRepository.parse_values(payload)
        assert list(df["hour"]) == [2, 2]

    def test_extra_sample_fields_are_ignored(self, ree_payload):
        df = REEPriceRepository.parse_values(ree_payload)
        assert list(df.columns) == ["datetime", "hour", "value"]


class TestFailures:
    def test_transport_error_returns_none(self, failing_session):
        assert REEPriceRepository(session=failing_session).find_by_date(DAY) is None

    def test_timeout_returns_none(self):
        session = make_session(error=requests.Timeout("slow"))
        assert REEPriceRepository(session=session).find_by_date(DAY) is None

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_non_success_status_returns_none(self, ree_payload, status_code):
        session = make_session(make_response(ree_payload, status_code=status_code))
        assert REEPriceRepository(session=session).find_by_date(DAY) is None

    def test_invalid_json_returns_none(self):
        session = make_session(make_response(json_error=ValueError("Expecting value")))
        assert REEPriceRepository(session=session).find_by_date(DAY) is None

    @pytest.mark.parametrize("payload", [
        {},
        {"included": []},
        {"included": None},
        {"included": [{}]},
        {"included": [{"attributes": {}}]},
        {"included": [{"attributes": {"values": []}}]},
        {"included": [{"attributes": {"values": [{"value": None, "datetime": "2026-10-19T00:00:00.000+02:00"}]}}]},
        {"included": [{"attributes": {"values": [{"value": 100.0}]}}]},
        {"included": [{"attributes": {"values": [{"value": 100.0, "datetime": "not a date"}]}}]},
        [],
    ])
    def test_malformed_payload_returns_none(self, payload):
        session = make_session(make_response(payload))
        assert REEPriceRepository(session=session).find_by_date(DAY) is None

    def test_errors_are_logged(self, failing_session, caplog):
        with caplog.at_level("ERROR", logger="pvpc_api.repositories.ree_price_repository"):
            REEPriceRepository(session=failing_session).find_by_date(DAY)
        assert "Error fetching REE prices" in caplog.text


class TestCurrentDay:
    def test_find_all_queries_day_of_given_moment(self, live_session):
        REEPriceRepository(session=live_session).find_all(now=NOW)
        _, kwargs = live_session.get.call_args
        assert kwargs["params"]["start_date"] == "2026-10-19T00:00"

    def test_find_all_uses_madrid_calendar_day(self, live_session):
        # 22:30 UTC is already 00:30 of the next day in Madrid
        late = pytz.utc.localize(datetime(2026, 10, 19, 22, 30))
        REEPriceRepository(session=live_session).find_all(now=late)
        _, kwargs = live_session.get.call_args
        assert kwargs["params"]["start_date"] == "2026-10-20T00:00"
        assert kwargs["params"]["end_date"] == "2026-10-20T23:59"


class TestClose:
    def test_close_releases_session(self, live_session):
        REEPriceRepository(session=live_session).close()
        live_session.close.assert_called_once()

    def test_service_close_delegates_to_repository(self, live_service, live_session):
        live_service.close()
        live_session.close.assert_called_once()
