"""City router — autocomplete search and catalog lookup."""

from fastapi import APIRouter, Depends, Query

from budgetwise.dependencies import get_city_search, require_city
from budgetwise.services.city_search_service import CitySearchService

router = APIRouter()


@router.get("/search")
async def search_cities(
    q: str = Query(""),
    limit: int = Query(10, ge=1, le=50),
    cities: CitySearchService = Depends(get_city_search),
):
    """Search cities by name, country, region or country code."""
    return [c.to_dict() for c in cities.search_cities_with_cache(q)[:limit]]


@router.get("/regions")
async def list_regions(cities: CitySearchService = Depends(get_city_search)):
    return cities.list_regions()


@router.get("/{city_id}")
async def get_city(city_id: str, cities: CitySearchService = Depends(get_city_search)):
    return require_city(cities, city_id).to_dict()
