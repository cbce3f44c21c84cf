"""Trip router — plan submission, plan-driven recommendations, destination details."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from budgetwise.dependencies import get_city_search, get_trip_planner, require_city
from budgetwise.exceptions import NoTransportAvailableError, TripValidationError
from budgetwise.schemas.trip import TripPlanRequest
from budgetwise.services.attraction_service import get_attractions, suggested_itinerary
from budgetwise.services.city_search_service import CitySearchService
from budgetwise.services.trip_planner_service import PlanRequest, TripPlannerService

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_plan_request(req: TripPlanRequest, cities: CitySearchService) -> PlanRequest:
    return PlanRequest(
        budget=req.budget,
        from_city=require_city(cities, req.from_city_id) if req.from_city_id else None,
        to_city=require_city(cities, req.to_city_id) if req.to_city_id else None,
        departure_date=req.departure_date,
        currency=req.currency.upper(),
        is_return=req.is_return,
        surprise_mode=req.surprise_mode,
        climate=req.climate,
    )


@router.post("/plan")
async def plan_trip(
    req: TripPlanRequest,
    cities: CitySearchService = Depends(get_city_search),
    planner: TripPlannerService = Depends(get_trip_planner),
):
    """Transport options to a chosen destination, or a surprise trip."""
    plan_req = _to_plan_request(req, cities)
    try:
        plan = planner.plan_trip(plan_req)
    except TripValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoTransportAvailableError as e:
        logger.warning(f"Trip planning failed: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    return plan.to_dict()


@router.post("/recommendations")
async def recommendations_for_plan(
    req: TripPlanRequest,
    cities: CitySearchService = Depends(get_city_search),
    planner: TripPlannerService = Depends(get_trip_planner),
):
    try:
        recs = planner.recommend_for_plan(_to_plan_request(req, cities))
    except TripValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [r.to_dict() for r in recs]


@router.get("/attractions/{city_id}")
async def city_attractions(city_id: str, cities: CitySearchService = Depends(get_city_search)):
    city = require_city(cities, city_id)
    return {
        "city": city.to_dict(),
        "attractions": [a.to_dict() for a in get_attractions(city)],
        "itinerary": suggested_itinerary(),
    }
