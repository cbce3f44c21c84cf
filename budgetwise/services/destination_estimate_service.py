"""Quick destination estimates — cost-of-living totals scored 0-100 without a transport search."""

import logging
import math

from budgetwise.config import settings
from budgetwise.data.cities import CITIES
from budgetwise.data.cost_of_living import get_cost_profile
from budgetwise.models.travel import City, DestinationEstimate
from budgetwise.services.estimator_config import EstimatorConfig, estimator_config

logger = logging.getLogger(__name__)


def calculate_match_score(
    budget: float,
    duration: int,
    total_cost: float,
    preferences: list[str],
    profile_tags: list[str],
    config: EstimatorConfig = estimator_config,
) -> float:
    """
    Budget fit (0-50) + duration fit (0-30) + preference overlap (0-20).

    The ideal duration is one day per `ideal_daily_spend` of budget.
    Preference overlap is the share of requested tags the destination
    carries; no preferences scores full marks.
    """
    w = config.match_score

    budget_diff = abs(budget - total_cost)
    budget_score = max(0.0, w.budget - (budget_diff / budget) * w.budget)

    ideal_duration = max(1, math.ceil(budget / w.ideal_daily_spend))
    duration_diff = abs(duration - ideal_duration)
    duration_score = max(0.0, w.duration - (duration_diff / ideal_duration) * w.duration)

    if preferences:
        wanted = {p.lower() for p in preferences}
        have = {t.lower() for t in profile_tags}
        preference_score = w.preferences * len(wanted & have) / len(wanted)
    else:
        preference_score = w.preferences

    return budget_score + duration_score + preference_score


def get_suggested_duration(budget: float, city_name: str, config: EstimatorConfig = estimator_config) -> int:
    """Days a budget covers at the city's daily cost, never fewer than the minimum."""
    daily_total = sum(get_cost_profile(city_name)["daily_costs"].values())
    return max(config.match_score.min_suggested_days, math.floor(budget / daily_total))


class DestinationEstimateService:
    def __init__(self, cities: tuple[City, ...] = CITIES, config: EstimatorConfig = estimator_config):
        self.cities = cities
        self.config = config

    def get_destination_estimates(
        self,
        budget: float,
        from_city: City | None = None,
        preferences: list[str] | None = None,
        duration: int = settings.default_trip_days,
    ) -> list[DestinationEstimate]:
        if budget <= 0 or duration <= 0:
            return []

        preferences = preferences or []
        limit = budget * settings.affordability_tolerance
        estimates = []

        for city in self.cities:
            if from_city is not None and city.id == from_city.id:
                continue

            profile = get_cost_profile(city.city)
            cost_breakdown = {k: v * duration for k, v in profile["daily_costs"].items()}
            total = sum(cost_breakdown.values())
            if total > limit:
                continue

            cost_breakdown["total"] = total
            estimates.append(DestinationEstimate(
                city=city,
                match_score=calculate_match_score(
                    budget, duration, total, preferences, profile["tags"], self.config
                ),
                cost_breakdown=cost_breakdown,
                suggested_duration=duration,
                tags=list(profile["tags"]),
                best_time_to_visit=list(profile["best_time_to_visit"]),
            ))

        estimates.sort(key=lambda e: e.match_score, reverse=True)
        logger.debug(f"Destination estimates for {budget:.2f}/{duration}d: {len(estimates)} within budget")
        return estimates


destination_estimate_service = DestinationEstimateService()
