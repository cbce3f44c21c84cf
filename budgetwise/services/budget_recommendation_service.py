"""Budget recommendation engine — ranks destinations a budget can actually reach.

Pipeline per candidate city:
    transport search (capped) → cheapest fare → cost tier from the remaining
    per-day budget → tier base costs × city multiplier × days → affordability
    filter → confidence score → tags.

Confidence peaks when the estimated total sits at 90% of the budget and
falls off linearly on either side; it is clamped to [0, 1].
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable

from budgetwise.config import settings
from budgetwise.data.cities import CITIES
from budgetwise.data.cost_of_living import (
    BASE_DAILY_COSTS,
    BUDGET_FRIENDLY_BELOW,
    CITY_COST_MULTIPLIERS,
    CITY_NAME_TAGS,
    LUXURY_ABOVE,
    get_cost_multiplier,
)
from budgetwise.models.travel import BudgetBreakdown, City, CostTier, Recommendation
from budgetwise.services.estimator_config import EstimatorConfig, estimator_config
from budgetwise.services.transport_service import TransportEstimator, transport_estimator

logger = logging.getLogger(__name__)


@dataclass
class RecommendationPreferences:
    max_flight_budget: float | None = None     # defaults to budget * 0.4
    preferred_regions: list[str] = field(default_factory=list)
    excluded_cities: list[str] = field(default_factory=list)


def get_travel_tier(daily_budget: float, config: EstimatorConfig = estimator_config) -> CostTier:
    return config.tiers.tier_for(daily_budget)


def calculate_daily_costs(city_id: str, tier: CostTier) -> dict[str, float]:
    """Per-day accommodation/food/activities for a city at a tier."""
    multiplier = get_cost_multiplier(city_id)
    return {k: v * multiplier for k, v in BASE_DAILY_COSTS[tier].items()}


def confidence_score(total_cost: float, budget: float, config: EstimatorConfig = estimator_config) -> float:
    c = config.confidence
    utilization = total_cost / budget
    return max(c.floor, min(c.ceiling, 1 - abs(c.target_utilization - utilization)))


def city_tags(city: City) -> list[str]:
    tags = []
    multiplier = CITY_COST_MULTIPLIERS.get(city.id)
    if multiplier is not None:
        if multiplier < BUDGET_FRIENDLY_BELOW:
            tags.append("budget-friendly")
        if multiplier > LUXURY_ABOVE:
            tags.append("luxury")
    for tag, names in CITY_NAME_TAGS.items():
        if city.city in names:
            tags.append(tag)
    return tags


class BudgetRecommendationService:
    """Scores every catalog city against a budget and returns the best matches."""

    def __init__(
        self,
        estimator: TransportEstimator = transport_estimator,
        cities: tuple[City, ...] = CITIES,
        today: Callable[[], date] = date.today,
        config: EstimatorConfig = estimator_config,
    ):
        self.estimator = estimator
        self.cities = cities
        self.today = today
        self.config = config

    def get_recommendations_for_budget(
        self,
        from_city: City,
        budget: float,
        days: int = settings.default_trip_days,
        preferences: RecommendationPreferences | None = None,
    ) -> list[Recommendation]:
        """Top recommendations, highest confidence first.

        Budget, fares and daily costs are all in the pricing currency (USD).
        """
        if budget <= 0 or days <= 0:
            return []

        prefs = preferences or RecommendationPreferences()
        max_flight_budget = (
            prefs.max_flight_budget
            if prefs.max_flight_budget is not None
            else budget * settings.default_flight_budget_share
        )
        departure = self.today() + timedelta(days=settings.recommendation_lead_days)
        excluded = set(prefs.excluded_cities)
        regions = set(prefs.preferred_regions)

        recommendations: list[Recommendation] = []
        for dest in self.cities:
            if dest.id == from_city.id or dest.id in excluded:
                continue
            if regions and dest.region not in regions:
                continue

            try:
                rec = self._evaluate(from_city, dest, budget, days, max_flight_budget, departure)
            except Exception as e:
                logger.error(f"Error processing city {dest.city}: {e}")
                continue
            if rec is not None:
                recommendations.append(rec)

        recommendations.sort(key=lambda r: r.confidence, reverse=True)
        logger.info(
            f"Recommendations from {from_city.id} for {budget:.2f} over {days} days: "
            f"{len(recommendations)} affordable, returning {min(len(recommendations), settings.recommendation_limit)}"
        )
        return recommendations[: settings.recommendation_limit]

    def _evaluate(
        self,
        from_city: City,
        dest: City,
        budget: float,
        days: int,
        max_flight_budget: float,
        departure: date,
    ) -> Recommendation | None:
        transport = self.estimator.search_transport_options(
            from_city, dest, departure, max_flight_budget, self.config.pricing_currency
        )
        if not transport:
            return None

        cheapest = transport[0]
        daily_budget = (budget - cheapest.price) / days
        tier = get_travel_tier(daily_budget, self.config)
        daily = calculate_daily_costs(dest.id, tier)

        breakdown = BudgetBreakdown(
            transport=cheapest.price,
            accommodation=daily["accommodation"] * days,
            food=daily["food"] * days,
            activities=daily["activities"] * days,
        )
        if breakdown.total > budget * settings.affordability_tolerance:
            return None

        return Recommendation(
            city=dest,
            transport_options=transport,
            budget_breakdown=breakdown,
            confidence=confidence_score(breakdown.total, budget, self.config),
            tags=city_tags(dest),
            tier=tier,
        )


budget_recommendation_service = BudgetRecommendationService()
