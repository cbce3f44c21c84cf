"""Tests for the quick cost-of-living destination estimates."""

import pytest

from budgetwise.services.destination_estimate_service import (
    DestinationEstimateService,
    calculate_match_score,
    get_suggested_duration,
)
from tests.conftest import CITY


@pytest.fixture
def service():
    return DestinationEstimateService()


class TestMatchScore:
    def test_perfect_fit(self):
        # total equals budget, duration equals ceil(1000 / 200), no preferences
        assert calculate_match_score(1000, 5, 1000, [], []) == pytest.approx(100)

    def test_partial_preference_overlap(self):
        score = calculate_match_score(1000, 5, 1000, ["culture", "beach"], ["Culture", "Food"])
        assert score == pytest.approx(90)

    def test_components_never_negative(self):
        assert calculate_match_score(100, 90, 5000, ["x"], ["y"]) == 0


class TestSuggestedDuration:
    @pytest.mark.parametrize("budget,city,days", [
        (1000, "Bangkok", 12),
        (1000, "Atlantis", 4),
        (100, "Bangkok", 3),
        (3100, "Paris", 10),
    ])
    def test_suggested_duration(self, budget, city, days):
        assert get_suggested_duration(budget, city) == days


class TestGetDestinationEstimates:
    def test_only_bangkok_fits_a_thousand(self, service):
        results = service.get_destination_estimates(1000)
        assert [e.city.city for e in results] == ["Bangkok"]

        est = results[0]
        assert est.cost_breakdown["total"] == 560
        assert est.cost_breakdown["accommodation"] == 280
        assert est.match_score == pytest.approx(28 + 18 + 20)
        assert est.suggested_duration == 7
        assert "Temples" in est.tags

    def test_origin_is_excluded(self, service):
        assert service.get_destination_estimates(1000, from_city=CITY["Bangkok"]) == []

    def test_results_sorted_by_score_and_within_budget(self, service):
        results = service.get_destination_estimates(5000, preferences=["Culture"], duration=10)
        scores = [e.match_score for e in results]
        assert scores == sorted(scores, reverse=True)
        assert all(e.cost_breakdown["total"] <= 5000 for e in results)
        assert all(0 <= e.match_score <= 100 for e in results)

    def test_nonpositive_inputs(self, service):
        assert service.get_destination_estimates(0) == []
        assert service.get_destination_estimates(1000, duration=0) == []

    def test_to_dict_rounds(self, service):
        d = service.get_destination_estimates(1000)[0].to_dict()
        assert d["city"]["id"] == "BKK-TH"
        assert d["match_score"] == 66.0
        assert d["best_time_to_visit"][0] == "November"
