"""Trip planner — validates plan requests and turns them into transport searches,
surprise trips, or budget recommendations."""

import logging
import math
import random
from dataclasses import dataclass
from datetime import date
from typing import Callable

from budgetwise.data.cities import CITIES
from budgetwise.exceptions import NoTransportAvailableError, TripValidationError
from budgetwise.models.travel import BudgetBreakdown, City, Recommendation, SurpriseTrip, TripPlan
from budgetwise.services.budget_recommendation_service import (
    BudgetRecommendationService,
    RecommendationPreferences,
    budget_recommendation_service,
)
from budgetwise.services.estimator_config import EstimatorConfig, estimator_config
from budgetwise.services.transport_service import TransportEstimator, transport_estimator

logger = logging.getLogger(__name__)

RETURN_TRIP_DAYS = 14
ONE_WAY_TRIP_DAYS = 7
RETURN_FLIGHT_SHARE = 0.3
ONE_WAY_FLIGHT_SHARE = 0.4


@dataclass
class PlanRequest:
    budget: float | None
    from_city: City | None
    to_city: City | None = None
    departure_date: date | str | None = None
    currency: str = "USD"
    is_return: bool = False
    surprise_mode: bool = False
    climate: str = "any"


def validate_plan(req: PlanRequest) -> None:
    """Raise TripValidationError with the first message the user has to act on."""
    if req.budget is None or math.isnan(req.budget) or req.budget <= 0:
        raise TripValidationError("Please enter a valid budget amount")
    if req.from_city is None:
        raise TripValidationError("Please select a departure city")
    if not req.surprise_mode and req.to_city is None:
        raise TripValidationError("Please select a destination city or enable surprise mode")
    if not req.departure_date:
        raise TripValidationError("Please select a departure date")


class TripPlannerService:
    def __init__(
        self,
        estimator: TransportEstimator = transport_estimator,
        recommender: BudgetRecommendationService = budget_recommendation_service,
        cities: tuple[City, ...] = CITIES,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
        config: EstimatorConfig = estimator_config,
    ):
        self.estimator = estimator
        self.recommender = recommender
        self.cities = {c.id: c for c in cities}
        self.rng = rng if rng is not None else estimator.rng
        self.today = today
        self.config = config

    def plan_trip(self, req: PlanRequest) -> TripPlan:
        validate_plan(req)

        if req.surprise_mode:
            surprise = self.generate_surprise_trip(req.from_city, req.budget, req.currency)
            return TripPlan(
                destination=surprise.destination,
                transport_options=surprise.transport_options,
                surprise=surprise,
            )

        options = self.estimator.search_transport_options(
            req.from_city, req.to_city, req.departure_date, req.budget, req.currency
        )
        logger.info(f"Planned {req.from_city.id}->{req.to_city.id}: {len(options)} transport options")
        return TripPlan(destination=req.to_city, transport_options=options)

    def generate_surprise_trip(self, from_city: City, budget: float, currency: str = "USD") -> SurpriseTrip:
        """Pick a destination at random and split what transport leaves over.

        Remaining budget goes 50% accommodation, 30% activities, 20% food, so
        the estimate always totals the full budget.
        """
        sp = self.config.surprise
        candidates = [self.cities[cid] for cid in sp.destinations if cid in self.cities and cid != from_city.id]
        if not candidates:
            raise NoTransportAvailableError(f"No surprise destinations available from {from_city.city}")

        destination = self.rng.choice(candidates)
        options = self.estimator.search_transport_options(
            from_city, destination, self.today(), budget, currency
        )
        if not options:
            raise NoTransportAvailableError(
                f"No transport from {from_city.label} to {destination.label} within {budget:.2f} {currency}"
            )

        cheapest = options[0]
        remaining = budget - cheapest.price
        logger.info(f"Surprise trip from {from_city.id}: {destination.id} at {cheapest.price} {currency}")
        return SurpriseTrip(
            destination=destination,
            transport_options=options,
            activities=list(sp.activities),
            estimated_costs=BudgetBreakdown(
                transport=cheapest.price,
                accommodation=remaining * sp.accommodation_share,
                food=remaining * sp.food_share,
                activities=remaining * sp.activities_share,
            ),
        )

    def recommend_for_plan(self, req: PlanRequest) -> list[Recommendation]:
        """Budget recommendations using the trip shape implied by the request."""
        if req.from_city is None or not req.budget or req.budget <= 0:
            raise TripValidationError("Please select a departure city and enter your budget")

        days = RETURN_TRIP_DAYS if req.is_return else ONE_WAY_TRIP_DAYS
        share = RETURN_FLIGHT_SHARE if req.is_return else ONE_WAY_FLIGHT_SHARE
        prefs = RecommendationPreferences(
            max_flight_budget=req.budget * share,
            preferred_regions=[req.climate] if req.climate and req.climate != "any" else [],
        )
        return self.recommender.get_recommendations_for_budget(
            req.from_city, req.budget, days, prefs
        )


trip_planner_service = TripPlannerService()
