"""Recommendation router — budget-driven destination ranking."""

from fastapi import APIRouter, Depends

from budgetwise.dependencies import (
    get_city_search,
    get_destination_estimates,
    get_recommender,
    require_city,
)
from budgetwise.schemas.recommendation import BudgetRecommendationRequest, DestinationEstimateRequest
from budgetwise.services.budget_recommendation_service import (
    BudgetRecommendationService,
    RecommendationPreferences,
)
from budgetwise.services.city_search_service import CitySearchService
from budgetwise.services.destination_estimate_service import DestinationEstimateService

router = APIRouter()


@router.post("/budget")
async def recommend_for_budget(
    req: BudgetRecommendationRequest,
    cities: CitySearchService = Depends(get_city_search),
    recommender: BudgetRecommendationService = Depends(get_recommender),
):
    """Top destinations reachable from a city within a budget."""
    from_city = require_city(cities, req.from_city_id)
    prefs = RecommendationPreferences(
        max_flight_budget=req.max_flight_budget,
        preferred_regions=req.preferred_regions,
        excluded_cities=req.excluded_cities,
    )
    recs = recommender.get_recommendations_for_budget(
        from_city, req.budget, req.days, prefs
    )
    return {
        "from_city": from_city.to_dict(),
        "budget": req.budget,
        "days": req.days,
        "currency": recommender.config.pricing_currency,
        "recommendations": [r.to_dict() for r in recs],
    }


@router.post("/estimates")
async def destination_estimates(
    req: DestinationEstimateRequest,
    cities: CitySearchService = Depends(get_city_search),
    estimates: DestinationEstimateService = Depends(get_destination_estimates),
):
    """Cost-of-living estimates per destination, best match first."""
    from_city = require_city(cities, req.from_city_id) if req.from_city_id else None
    results = estimates.get_destination_estimates(
        req.budget, from_city, req.preferences, req.duration
    )
    return [e.to_dict() for e in results]
