"""Shared fixtures: catalog cities, seeded estimators, fake clocks and stubs."""

import os
import random
import tempfile

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "budgetwise-test-logs"))

import pytest

from budgetwise.data.cities import CITIES
from budgetwise.models.travel import TransportOption
from budgetwise.services.transport_service import TransportEstimator

CITY = {c.city: c for c in CITIES}


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubEstimator:
    """Returns one fixed-price flight per destination; optionally fails for some cities."""

    def __init__(self, prices: dict[str, float] | None = None, default_price: float | None = 300.0,
                 failing: set[str] | None = None):
        self.prices = prices or {}
        self.default_price = default_price
        self.failing = failing or set()
        self.calls = []
        self.rng = random.Random(0)

    def search_transport_options(self, from_city, to_city, departure_date, budget, currency="USD"):
        self.calls.append((from_city.id, to_city.id, departure_date, budget, currency))
        if to_city.id in self.failing:
            raise RuntimeError(f"lookup failed for {to_city.id}")
        price = self.prices.get(to_city.id, self.default_price)
        if price is None or price > budget:
            return []
        return [TransportOption(
            type="flight",
            provider="Stub Air",
            price=price,
            currency=currency,
            duration="1h 0m",
            departure="2030-01-01T07:00:00",
            arrival="2030-01-01T08:00:00",
        )]


@pytest.fixture
def london():
    return CITY["London"]


@pytest.fixture
def paris():
    return CITY["Paris"]


@pytest.fixture
def delhi():
    return CITY["Delhi"]


@pytest.fixture
def sydney():
    return CITY["Sydney"]


@pytest.fixture
def seeded_estimator():
    return TransportEstimator(rng=random.Random(42))


@pytest.fixture
def fake_clock():
    return FakeClock()
