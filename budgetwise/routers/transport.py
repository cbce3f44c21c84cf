"""Transport router — mock transport search and route distance."""

from fastapi import APIRouter, Depends, Query

from budgetwise.dependencies import get_city_search, get_transport_estimator, require_city
from budgetwise.schemas.transport import TransportSearchRequest
from budgetwise.services.city_search_service import CitySearchService
from budgetwise.services.transport_service import TransportEstimator, estimate_distance

router = APIRouter()


@router.post("/search")
async def search_transport(
    req: TransportSearchRequest,
    cities: CitySearchService = Depends(get_city_search),
    estimator: TransportEstimator = Depends(get_transport_estimator),
):
    """Flights, trains and buses within budget, cheapest first."""
    from_city = require_city(cities, req.from_city_id)
    to_city = require_city(cities, req.to_city_id)
    options = estimator.search_transport_options(
        from_city, to_city, req.departure_date, req.budget, req.currency.upper()
    )
    return {
        "from_city": from_city.to_dict(),
        "to_city": to_city.to_dict(),
        "distance_km": round(estimate_distance(from_city, to_city), 1),
        "options": [o.to_dict() for o in options],
    }


@router.get("/distance")
async def get_distance(
    from_city_id: str = Query(...),
    to_city_id: str = Query(...),
    cities: CitySearchService = Depends(get_city_search),
):
    from_city = require_city(cities, from_city_id)
    to_city = require_city(cities, to_city_id)
    return {
        "from_city_id": from_city.id,
        "to_city_id": to_city.id,
        "distance_km": round(estimate_distance(from_city, to_city), 1),
    }
