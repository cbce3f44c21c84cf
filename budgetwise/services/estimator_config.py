"""Estimator configuration — single source for pricing brackets and thresholds."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PriceBracket:
    """Uniform price range; the upper bound is exclusive."""
    min: int
    max: int


@dataclass(frozen=True)
class PriceBrackets:
    """Mock fare ranges by distance (km)."""
    short: PriceBracket = PriceBracket(50, 200)       # < 1000 km
    medium: PriceBracket = PriceBracket(150, 500)     # < 3000 km
    long: PriceBracket = PriceBracket(400, 1200)      # beyond
    short_max_km: float = 1000.0
    medium_max_km: float = 3000.0

    def for_distance(self, distance_km: float) -> PriceBracket:
        if distance_km < self.short_max_km:
            return self.short
        if distance_km < self.medium_max_km:
            return self.medium
        return self.long


@dataclass(frozen=True)
class FlightParams:
    min_offers: int = 3
    max_offers: int = 5
    avg_speed_kmh: float = 800.0
    first_departure_hour: int = 7
    departure_spacing_hours: int = 3
    airlines: tuple[str, ...] = ("Budget Air", "Sky Express", "Global Wings", "City Hopper")
    aircraft: str = "Boeing 737"


@dataclass(frozen=True)
class GroundParams:
    """Train or bus synthesis for short routes."""
    mode: str
    provider: str
    max_distance_km: float
    duration_factor: float   # applied to distance before the 800 km/h duration model
    price_factor: float      # applied to distance before bracket selection
    departure_hour: int
    number_prefix: str
    travel_class: str
    terminal_suffix: str


TRAIN = GroundParams(
    mode="train",
    provider="EuroRail Express",
    max_distance_km=1000.0,
    duration_factor=0.7,
    price_factor=0.5,
    departure_hour=8,
    number_prefix="TR",
    travel_class="First Class",
    terminal_suffix="Central",
)

BUS = GroundParams(
    mode="bus",
    provider="EuroLines",
    max_distance_km=500.0,
    duration_factor=0.4,
    price_factor=0.3,
    departure_hour=9,
    number_prefix="BUS",
    travel_class="Standard",
    terminal_suffix="Bus Terminal",
)


@dataclass(frozen=True)
class TierThresholds:
    """Per-day spend (USD) that separates cost tiers."""
    budget_below: float = 150.0
    moderate_below: float = 400.0

    def tier_for(self, daily_budget: float) -> str:
        if daily_budget < self.budget_below:
            return "BUDGET"
        if daily_budget < self.moderate_below:
            return "MODERATE"
        return "LUXURY"


@dataclass(frozen=True)
class ConfidenceParams:
    target_utilization: float = 0.9
    floor: float = 0.0
    ceiling: float = 1.0


@dataclass(frozen=True)
class MatchScoreWeights:
    """Point budget for the quick destination estimate (sums to 100)."""
    budget: float = 50.0
    duration: float = 30.0
    preferences: float = 20.0
    ideal_daily_spend: float = 200.0
    min_suggested_days: int = 3


@dataclass(frozen=True)
class SurpriseParams:
    destinations: tuple[str, ...] = ("BCN-ES", "PRG-CZ", "AMS-NL")
    accommodation_share: float = 0.5
    activities_share: float = 0.3
    food_share: float = 0.2
    activities: tuple[str, ...] = (
        "City sightseeing tour",
        "Local food tasting",
        "Museum visits",
        "Cultural experiences",
    )


@dataclass(frozen=True)
class EstimatorConfig:
    """Top-level config aggregating all sub-configs."""
    earth_radius_km: float = 6371.0
    # fare brackets and daily cost tables are denominated in this currency
    pricing_currency: str = "USD"
    prices: PriceBrackets = field(default_factory=PriceBrackets)
    flights: FlightParams = field(default_factory=FlightParams)
    train: GroundParams = TRAIN
    bus: GroundParams = BUS
    tiers: TierThresholds = field(default_factory=TierThresholds)
    confidence: ConfidenceParams = field(default_factory=ConfidenceParams)
    match_score: MatchScoreWeights = field(default_factory=MatchScoreWeights)
    surprise: SurpriseParams = field(default_factory=SurpriseParams)


# Singleton — import this everywhere
estimator_config = EstimatorConfig()
