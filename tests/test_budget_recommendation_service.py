"""Tests for the budget recommendation engine."""

import random
from datetime import date, timedelta

import pytest

from budgetwise.data.cities import CITIES
from budgetwise.services.budget_recommendation_service import (
    BudgetRecommendationService,
    RecommendationPreferences,
    calculate_daily_costs,
    city_tags,
    confidence_score,
    get_travel_tier,
)
from budgetwise.services.transport_service import TransportEstimator
from tests.conftest import CITY, StubEstimator

FIXED_TODAY = date(2030, 1, 1)


def _service(estimator, cities=CITIES):
    return BudgetRecommendationService(estimator=estimator, cities=cities, today=lambda: FIXED_TODAY)


class TestHelpers:
    @pytest.mark.parametrize("daily,tier", [
        (0, "BUDGET"),
        (149.99, "BUDGET"),
        (150, "MODERATE"),
        (399.99, "MODERATE"),
        (400, "LUXURY"),
    ])
    def test_travel_tier(self, daily, tier):
        assert get_travel_tier(daily) == tier

    def test_daily_costs_apply_multiplier(self):
        costs = calculate_daily_costs("DEL-IN", "BUDGET")
        assert costs == pytest.approx({"accommodation": 20, "food": 12, "activities": 8})
        assert sum(costs.values()) == pytest.approx(40)

    def test_daily_costs_default_multiplier(self):
        assert calculate_daily_costs("PRG-CZ", "MODERATE") == {"accommodation": 150, "food": 60, "activities": 40}

    def test_confidence_peaks_at_ninety_percent(self):
        assert confidence_score(900, 1000) == pytest.approx(1.0)
        assert confidence_score(500, 1000) == pytest.approx(0.6)

    def test_confidence_is_clamped(self):
        assert confidence_score(3000, 1000) == 0.0
        assert 0.0 <= confidence_score(1, 1000) <= 1.0

    def test_tags(self):
        assert city_tags(CITY["Delhi"]) == ["budget-friendly", "cultural"]
        assert city_tags(CITY["London"]) == ["luxury"]
        assert city_tags(CITY["Dubai"]) == ["beach"]
        assert city_tags(CITY["Paris"]) == ["luxury", "historic"]
        assert city_tags(CITY["Prague"]) == []


class TestGetRecommendationsForBudget:
    def test_delhi_scenario(self, london):
        """Delhi at multiplier 0.4 in the BUDGET tier costs 40/day, 280 for a week."""
        est = StubEstimator(prices={"DEL-IN": 300.0}, default_price=None)
        recs = _service(est).get_recommendations_for_budget(london, 1000, 7)

        assert len(recs) == 1
        rec = recs[0]
        assert rec.city.id == "DEL-IN"
        assert rec.tier == "BUDGET"
        assert rec.budget_breakdown.transport == 300
        assert rec.budget_breakdown.accommodation + rec.budget_breakdown.food + rec.budget_breakdown.activities == pytest.approx(280)
        assert rec.budget_breakdown.total == pytest.approx(580)
        assert rec.confidence == pytest.approx(1 - abs(0.9 - 0.58))
        assert "budget-friendly" in rec.tags

    def test_transport_cap_defaults_to_forty_percent(self, london):
        est = StubEstimator()
        _service(est).get_recommendations_for_budget(london, 1000, 7)
        assert est.calls
        assert all(call[3] == pytest.approx(400) for call in est.calls)

    def test_explicit_flight_cap_and_departure_date(self, london):
        est = StubEstimator()
        prefs = RecommendationPreferences(max_flight_budget=250)
        _service(est).get_recommendations_for_budget(london, 1000, 7, prefs)
        assert all(call[3] == 250 for call in est.calls)
        assert all(call[2] == FIXED_TODAY + timedelta(days=30) for call in est.calls)

    def test_over_budget_candidates_are_dropped(self, london):
        # New York at 2.0x: BUDGET tier 100/day * 2.0 * 7 = 1400 > 1000
        est = StubEstimator(prices={"NYC-US": 100.0}, default_price=None)
        assert _service(est).get_recommendations_for_budget(london, 1000, 7) == []

    def test_origin_excluded_and_preferences_respected(self, london):
        est = StubEstimator(default_price=50.0)
        prefs = RecommendationPreferences(excluded_cities=["PAR-FR"], preferred_regions=["Île-de-France", "Catalonia"])
        recs = _service(est).get_recommendations_for_budget(london, 5000, 7, prefs)
        assert [r.city.id for r in recs] == ["BCN-ES"]
        assert all(call[1] != "LON-UK" for call in est.calls)

    def test_failing_candidate_is_skipped(self, london, caplog):
        est = StubEstimator(default_price=100.0, failing={"BKK-TH"})
        recs = _service(est).get_recommendations_for_budget(london, 2000, 5)
        assert recs
        assert all(r.city.id != "BKK-TH" for r in recs)
        assert "Error processing city Bangkok" in caplog.text

    def test_candidates_without_transport_are_skipped(self, london):
        est = StubEstimator(prices={"ROM-IT": 250.0}, default_price=None)
        recs = _service(est).get_recommendations_for_budget(london, 3000, 7)
        assert [r.city.id for r in recs] == ["ROM-IT"]

    def test_transport_is_searched_in_usd(self, london):
        est = StubEstimator(default_price=100.0)
        recs = _service(est).get_recommendations_for_budget(london, 3000, 7)
        assert recs
        assert {call[4] for call in est.calls} == {"USD"}

    def test_large_budget_options_are_labelled_usd(self, london):
        service = _service(TransportEstimator(rng=random.Random(9)))
        recs = service.get_recommendations_for_budget(london, 100_000, 7)
        assert recs
        assert {o.currency for r in recs for o in r.transport_options} == {"USD"}

    def test_nonpositive_budget_returns_nothing(self, london):
        assert _service(StubEstimator()).get_recommendations_for_budget(london, 0, 7) == []

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("budget,days", [(800, 3), (2500, 7), (6000, 10)])
    def test_invariants_with_random_transport(self, london, seed, budget, days):
        service = _service(TransportEstimator(rng=random.Random(seed)))
        recs = service.get_recommendations_for_budget(london, budget, days)

        assert len(recs) <= 5
        confidences = [r.confidence for r in recs]
        assert confidences == sorted(confidences, reverse=True)
        for r in recs:
            b = r.budget_breakdown
            assert b.total <= budget
            assert b.total == pytest.approx(b.transport + b.accommodation + b.food + b.activities, abs=1e-6)
            assert 0.0 <= r.confidence <= 1.0
            assert r.city.id != london.id
            assert b.transport == r.transport_options[0].price
