"""City search — ranked catalog lookup with a time-boxed result cache."""

import logging

from budgetwise.config import settings
from budgetwise.data.cities import CITIES
from budgetwise.exceptions import CityNotFoundError
from budgetwise.models.travel import City
from budgetwise.services.cache_service import TTLCache, city_search_cache

logger = logging.getLogger(__name__)


def _relevance_key(city: City, query: str) -> tuple[int, int, int]:
    """Sort key: exact name match, then name prefix, then larger population."""
    name = city.city.lower()
    return (
        0 if name == query else 1,
        0 if name.startswith(query) else 1,
        -city.population,
    )


class CitySearchService:
    """Searches the static city catalog."""

    def __init__(
        self,
        cities: tuple[City, ...] = CITIES,
        cache: TTLCache = city_search_cache,
        min_query_length: int = settings.city_search_min_query_length,
    ):
        self.cities = cities
        self.cache = cache
        self.min_query_length = min_query_length
        self._by_id = {c.id: c for c in cities}

    def search_cities(self, query: str) -> list[City]:
        """Case-insensitive match on city, country or region name, or exact country code."""
        q = query.lower()
        matches = [
            c for c in self.cities
            if q in c.city.lower()
            or q in c.country.lower()
            or q in c.region.lower()
            or c.country_code.lower() == q
        ]
        return sorted(matches, key=lambda c: _relevance_key(c, q))

    def search_cities_with_cache(self, query: str) -> list[City]:
        """Cached search. Queries under the minimum length return [] without touching the cache."""
        if not query or len(query) < self.min_query_length:
            return []

        key = TTLCache.city_search_key(query)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"City search cache hit for {query!r}")
            return list(cached)

        results = self.search_cities(query)
        self.cache.set(key, tuple(results))
        return results

    def get_city(self, city_id: str) -> City:
        city = self._by_id.get(city_id)
        if city is None:
            raise CityNotFoundError(city_id)
        return city

    def list_regions(self) -> list[str]:
        return sorted({c.region for c in self.cities})


city_search_service = CitySearchService()
