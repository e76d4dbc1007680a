"""
Tests for the historical monthly averages.
"""

from pvpc_api.models import MonthlyAverage
from pvpc_api.repositories import MonthlyPriceRepository
from pvpc_api.services import MonthlyPriceService


class TestMonthlyAverages:
    def test_thirteen_entries(self):
        assert len(MonthlyPriceService().monthly_averages()) == 13

    def test_chronological_order(self):
        months = [m.month for m in MonthlyPriceService().monthly_averages()]
        assert months[0] == "Feb 25"
        assert months[-1] == "Feb 26"
        assert months[1:4] == ["Mar 25", "Abr 25", "May 25"]

    def test_values_are_stable_across_calls(self):
        service = MonthlyPriceService()
        assert service.monthly_averages() == service.monthly_averages()

    def test_known_values(self):
        averages = MonthlyPriceService().monthly_averages()
        assert averages[0] == MonthlyAverage(month="Feb 25", price=0.1757)
        assert averages[-1] == MonthlyAverage(month="Feb 26", price=0.1184)

    def test_repository_count_matches(self):
        repository = MonthlyPriceRepository()
        assert repository.count() == len(repository.find_all()) == 13

    def test_response_wrapper(self):
        response = MonthlyPriceService().get_monthly_prices()
        assert response.count == 13
        assert response.monthly_prices[2].month == "Abr 25"
