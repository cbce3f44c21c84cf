"""Transport estimator — great-circle distance and mock flight/train/bus offers.

No real transport data is consulted: prices and durations are illustrative,
scaled by route distance. All randomness comes from the injected
`random.Random`, so a seeded generator makes output reproducible.
"""

import logging
import math
import random
from datetime import date, datetime, timedelta

from budgetwise.config import settings
from budgetwise.models.travel import City, TransportOption
from budgetwise.services.estimator_config import EstimatorConfig, GroundParams, estimator_config

logger = logging.getLogger(__name__)


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float, radius_km: float = 6371.0
) -> float:
    """Great-circle distance between two lat/lon points in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # float drift can push a past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return radius_km * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def estimate_distance(city_a: City, city_b: City) -> float:
    """Distance in km between two cities."""
    return haversine_km(
        city_a.latitude, city_a.longitude,
        city_b.latitude, city_b.longitude,
        estimator_config.earth_radius_km,
    )


def split_duration(distance_km: float, speed_kmh: float = 800.0) -> tuple[int, int]:
    """Travel time as (hours, minutes), both floored."""
    hours = math.floor(distance_km / speed_kmh)
    minutes = math.floor((distance_km % speed_kmh) / (speed_kmh / 60))
    return hours, minutes


def format_duration(hours: int, minutes: int) -> str:
    return f"{hours}h {minutes}m"


def _parse_departure_date(departure_date: date | str) -> date:
    if isinstance(departure_date, datetime):
        return departure_date.date()
    if isinstance(departure_date, date):
        return departure_date
    return date.fromisoformat(departure_date)


class TransportEstimator:
    """Synthesizes plausible transport offers for a city pair."""

    def __init__(self, rng: random.Random | None = None, config: EstimatorConfig = estimator_config):
        self.rng = rng if rng is not None else random.Random(settings.mock_seed)
        self.config = config

    def mock_price(self, distance_km: float) -> int:
        """Integer fare drawn uniformly from the distance bracket."""
        bracket = self.config.prices.for_distance(distance_km)
        return self.rng.randrange(bracket.min, bracket.max)

    def search_transport_options(
        self,
        from_city: City,
        to_city: City,
        departure_date: date | str,
        budget: float,
        currency: str = "USD",
    ) -> list[TransportOption]:
        """Flights plus, on short routes, one train and one bus; cheapest first.

        Offers above `budget` are dropped, not replaced, so the result may be
        empty. A malformed ISO date string raises ValueError.
        """
        day = _parse_departure_date(departure_date)
        distance = estimate_distance(from_city, to_city)

        options = self._flight_offers(from_city, to_city, day, distance, budget, currency)

        for params in (self.config.train, self.config.bus):
            if distance < params.max_distance_km:
                offer = self._ground_offer(params, from_city, to_city, day, distance, budget, currency)
                if offer is not None:
                    options.append(offer)

        logger.debug(
            f"{from_city.id}->{to_city.id}: {distance:.0f} km, "
            f"{len(options)} options within {budget:.2f} {currency}"
        )
        return sorted(options, key=lambda o: o.price)

    def _flight_offers(
        self,
        from_city: City,
        to_city: City,
        day: date,
        distance: float,
        budget: float,
        currency: str,
    ) -> list[TransportOption]:
        fp = self.config.flights
        num_offers = self.rng.randint(fp.min_offers, fp.max_offers)
        hours, minutes = split_duration(distance, fp.avg_speed_kmh)
        offers = []

        for i in range(num_offers):
            price = self.mock_price(distance)
            if price > budget:
                continue

            airline = self.rng.choice(fp.airlines)
            dep_time = datetime(day.year, day.month, day.day) + timedelta(
                hours=fp.first_departure_hour + i * fp.departure_spacing_hours
            )
            arr_time = dep_time + timedelta(hours=hours, minutes=minutes)

            offers.append(TransportOption(
                type="flight",
                provider=airline,
                price=price,
                currency=currency,
                duration=format_duration(hours, minutes),
                departure=dep_time.isoformat(),
                arrival=arr_time.isoformat(),
                details={
                    "flight_number": f"{airline[:2].upper()}{self.rng.randint(100, 999)}",
                    "aircraft": fp.aircraft,
                    "from_airport": f"{from_city.city} International",
                    "to_airport": f"{to_city.city} International",
                },
            ))

        return offers

    def _ground_offer(
        self,
        params: GroundParams,
        from_city: City,
        to_city: City,
        day: date,
        distance: float,
        budget: float,
        currency: str,
    ) -> TransportOption | None:
        hours, minutes = split_duration(distance * params.duration_factor, self.config.flights.avg_speed_kmh)
        price = self.mock_price(distance * params.price_factor)
        if price > budget:
            return None

        dep_time = datetime(day.year, day.month, day.day, params.departure_hour)
        arr_time = dep_time + timedelta(hours=hours, minutes=minutes)
        mode = params.mode

        return TransportOption(
            type=mode,
            provider=params.provider,
            price=price,
            currency=currency,
            duration=format_duration(hours, minutes),
            departure=dep_time.isoformat(),
            arrival=arr_time.isoformat(),
            details={
                f"{mode}_number": f"{params.number_prefix}{self.rng.randint(100, 999)}",
                "class": params.travel_class,
                "from_station": f"{from_city.city} {params.terminal_suffix}",
                "to_station": f"{to_city.city} {params.terminal_suffix}",
            },
        )


transport_estimator = TransportEstimator()
