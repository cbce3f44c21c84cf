"""Exchange-rate client — fetches live rates over HTTP and caches them per base currency."""

import logging

import httpx

from budgetwise.config import settings
from budgetwise.exceptions import ExchangeRateError
from budgetwise.services.cache_service import TTLCache, exchange_rate_cache

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Adapter for the open.er-api.com `latest` endpoint."""

    def __init__(
        self,
        cache: TTLCache = exchange_rate_cache,
        base_url: str = settings.exchange_rate_base_url,
        timeout: float = settings.exchange_rate_timeout,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def get_exchange_rates(self, base_currency: str = "USD") -> dict[str, float]:
        """Rates keyed by currency code, relative to `base_currency`.

        A failed fetch raises ExchangeRateError and leaves any cached entry
        untouched; nothing is retried.
        """
        key = TTLCache.rates_key(base_currency)
        cached = self.cache.get(key)
        if cached is not None:
            return dict(cached)

        client = await self._get_client()
        try:
            resp = await client.get(f"/{base_currency.upper()}")
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Exchange rate API error: {e.response.status_code}")
            raise ExchangeRateError(f"Exchange rate API returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Exchange rate request error: {e}")
            raise ExchangeRateError("Exchange rate API unreachable") from e
        except ValueError as e:
            logger.error(f"Exchange rate API returned invalid JSON: {e}")
            raise ExchangeRateError("Invalid response from exchange rate API") from e

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict) or not rates:
            logger.error(f"Exchange rate response for {base_currency} has no rates")
            raise ExchangeRateError("Invalid response from exchange rate API")

        try:
            rates = {code: float(rate) for code, rate in rates.items()}
        except (TypeError, ValueError) as e:
            logger.error(f"Exchange rate response for {base_currency} has a non-numeric rate: {e}")
            raise ExchangeRateError("Invalid response from exchange rate API") from e

        self.cache.set(key, rates)
        logger.info(f"Exchange rates refreshed for {base_currency.upper()}: {len(rates)} currencies")
        return dict(rates)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


exchange_rate_service = ExchangeRateService()
