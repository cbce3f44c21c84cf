"""In-process TTL cache for exchange rates and city search results."""

import logging
import time
from typing import Any, Callable

from budgetwise.config import settings

logger = logging.getLogger(__name__)

# TTLs in seconds
TTL_EXCHANGE_RATES = settings.exchange_rate_cache_ttl
TTL_CITY_SEARCH = settings.city_search_cache_ttl


class TTLCache:
    """Time-boxed memoization; entries are valid for `ttl` seconds after being set.

    A read after expiry is a miss but leaves the entry in place. Each `set`
    drops every expired entry, so the cache holds at most the keys written
    within the last `ttl` seconds.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic, name: str = "cache"):
        self.ttl = ttl
        self.name = name
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or expiry."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at >= self.ttl:
            logger.debug(f"{self.name}: expired entry for {key!r}")
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at >= self.ttl]
        for k in expired:
            del self._entries[k]
        if expired:
            logger.debug(f"{self.name}: dropped {len(expired)} expired entries")
        self._entries[key] = (now, value)

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)

    # Typed helpers

    @staticmethod
    def rates_key(base_currency: str) -> str:
        return f"rates:{base_currency.upper()}"

    @staticmethod
    def city_search_key(query: str) -> str:
        return f"cities:{query.lower()}"


# Process-wide instances, handed to the services that need them
exchange_rate_cache = TTLCache(TTL_EXCHANGE_RATES, name="exchange_rates")
city_search_cache = TTLCache(TTL_CITY_SEARCH, name="city_search")
