"""Tests for city search and the TTL cache behind it."""

import pytest

from budgetwise.exceptions import CityNotFoundError
from budgetwise.services.cache_service import TTLCache
from budgetwise.services.city_search_service import CitySearchService


@pytest.fixture
def cache(fake_clock):
    return TTLCache(ttl=3600, clock=fake_clock, name="test")


@pytest.fixture
def service(cache):
    return CitySearchService(cache=cache)


class TestSearchCities:
    def test_prefix_match_ranks_first(self, service):
        results = service.search_cities("lon")
        names = [c.city for c in results]
        assert names[0] == "London"
        # Barcelona matches "lon" inside its name and its region
        assert "Barcelona" in names

    def test_exact_match_beats_prefix(self, service):
        results = service.search_cities("paris")
        assert results[0].city == "Paris"

    def test_case_insensitive_country_and_region(self, service):
        assert [c.city for c in service.search_cities("JAPAN")] == ["Tokyo"]
        assert [c.city for c in service.search_cities("catalonia")] == ["Barcelona"]

    def test_country_code_must_match_exactly(self, service):
        assert [c.city for c in service.search_cities("in")][0] == "Delhi"
        assert any(c.city == "Delhi" for c in service.search_cities("IN"))

    def test_non_prefix_matches_ordered_by_population(self, service):
        results = service.search_cities("an")
        non_prefix = [c for c in results if not c.city.lower().startswith("an")]
        populations = [c.population for c in non_prefix]
        assert populations == sorted(populations, reverse=True)

    def test_no_match(self, service):
        assert service.search_cities("zzz") == []


class TestSearchCitiesWithCache:
    def test_short_query_skips_cache(self, service, cache):
        assert service.search_cities_with_cache("p") == []
        assert service.search_cities_with_cache("") == []
        assert len(cache) == 0

    def test_results_are_cached_by_lowercased_query(self, service, cache):
        first = service.search_cities_with_cache("Lon")
        assert len(cache) == 1
        assert TTLCache.city_search_key("lon") in cache
        assert service.search_cities_with_cache("LON") == first
        assert len(cache) == 1

    def test_cached_results_survive_catalog_changes_until_expiry(self, cache, fake_clock):
        service = CitySearchService(cache=cache)
        assert service.search_cities_with_cache("par")[0].city == "Paris"

        service.cities = ()
        fake_clock.advance(3599)
        assert service.search_cities_with_cache("par")[0].city == "Paris"

        fake_clock.advance(1)
        assert service.search_cities_with_cache("par") == []


class TestLookup:
    def test_get_city(self, service):
        assert service.get_city("LON-UK").city == "London"

    def test_unknown_city(self, service):
        with pytest.raises(CityNotFoundError):
            service.get_city("XXX-XX")

    def test_regions_sorted_unique(self, service):
        regions = service.list_regions()
        assert regions == sorted(set(regions))
        assert "Catalonia" in regions


class TestTTLCache:
    def test_get_set_and_expiry(self, cache, fake_clock):
        cache.set("k", 1)
        assert cache.get("k") == 1
        fake_clock.advance(3600)
        assert cache.get("k") is None
        # expired entries are replaced, not evicted
        assert len(cache) == 1
        cache.set("k", 2)
        assert cache.get("k") == 2

    def test_set_drops_expired_entries(self, cache, fake_clock):
        for q in ("lon", "par", "ber"):
            cache.set(TTLCache.city_search_key(q), ())
        fake_clock.advance(1800)
        cache.set(TTLCache.city_search_key("rom"), ())
        assert len(cache) == 4

        fake_clock.advance(1800)
        cache.set(TTLCache.city_search_key("tok"), ())
        assert len(cache) == 2
        assert TTLCache.city_search_key("rom") in cache
        assert TTLCache.city_search_key("lon") not in cache

    def test_delete_and_clear(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.delete("a") is True
        assert cache.delete("a") is False
        cache.clear()
        assert len(cache) == 0
