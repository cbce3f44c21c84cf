"""FastAPI dependency providers — routers resolve services here so tests can override them."""

from fastapi import HTTPException

from budgetwise.exceptions import CityNotFoundError
from budgetwise.models.travel import City
from budgetwise.services.budget_recommendation_service import (
    BudgetRecommendationService,
    budget_recommendation_service,
)
from budgetwise.services.city_search_service import CitySearchService, city_search_service
from budgetwise.services.destination_estimate_service import (
    DestinationEstimateService,
    destination_estimate_service,
)
from budgetwise.services.exchange_rate_service import ExchangeRateService, exchange_rate_service
from budgetwise.services.transport_service import TransportEstimator, transport_estimator
from budgetwise.services.trip_planner_service import TripPlannerService, trip_planner_service


def get_city_search() -> CitySearchService:
    return city_search_service


def get_transport_estimator() -> TransportEstimator:
    return transport_estimator


def get_recommender() -> BudgetRecommendationService:
    return budget_recommendation_service


def get_destination_estimates() -> DestinationEstimateService:
    return destination_estimate_service


def get_trip_planner() -> TripPlannerService:
    return trip_planner_service


def get_exchange_rates() -> ExchangeRateService:
    return exchange_rate_service


def require_city(cities: CitySearchService, city_id: str) -> City:
    """Resolve a catalog id or fail the request with 404."""
    try:
        return cities.get_city(city_id)
    except CityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
