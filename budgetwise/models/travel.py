"""Plain travel records shared by the estimator, the engines and the API."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

TransportMode = Literal["flight", "train", "bus"]
CostTier = Literal["BUDGET", "MODERATE", "LUXURY"]


@dataclass(frozen=True)
class City:
    id: str
    city: str
    country: str
    country_code: str
    region: str
    latitude: float
    longitude: float
    population: int

    @property
    def label(self) -> str:
        return f"{self.city}, {self.country}"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TransportOption:
    type: TransportMode
    provider: str
    price: float
    currency: str
    duration: str            # "Xh Ym"
    departure: str           # ISO-8601
    arrival: str             # ISO-8601
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BudgetBreakdown:
    """Trip cost split into its four components; total is always their sum."""
    transport: float = 0.0
    accommodation: float = 0.0
    food: float = 0.0
    activities: float = 0.0

    @property
    def total(self) -> float:
        return self.transport + self.accommodation + self.food + self.activities

    def to_dict(self) -> dict:
        return {
            "transport": round(self.transport, 2),
            "accommodation": round(self.accommodation, 2),
            "food": round(self.food, 2),
            "activities": round(self.activities, 2),
            "total": round(self.total, 2),
        }


@dataclass
class Recommendation:
    city: City
    transport_options: list[TransportOption]
    budget_breakdown: BudgetBreakdown
    confidence: float         # 0-1, how close spend is to the 90% utilization target
    tags: list[str] = field(default_factory=list)
    tier: CostTier = "BUDGET"

    def to_dict(self) -> dict:
        return {
            "city": self.city.to_dict(),
            "transport_options": [t.to_dict() for t in self.transport_options],
            "budget_breakdown": self.budget_breakdown.to_dict(),
            "confidence": round(self.confidence, 4),
            "tags": list(self.tags),
            "tier": self.tier,
        }


@dataclass
class DestinationEstimate:
    city: City
    match_score: float        # 0-100
    cost_breakdown: dict[str, float]
    suggested_duration: int
    tags: list[str] = field(default_factory=list)
    best_time_to_visit: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "city": self.city.to_dict(),
            "match_score": round(self.match_score, 1),
            "cost_breakdown": {k: round(v, 2) for k, v in self.cost_breakdown.items()},
            "suggested_duration": self.suggested_duration,
            "tags": list(self.tags),
            "best_time_to_visit": list(self.best_time_to_visit),
        }


@dataclass
class SurpriseTrip:
    destination: City
    transport_options: list[TransportOption]
    activities: list[str]
    estimated_costs: BudgetBreakdown

    def to_dict(self) -> dict:
        return {
            "destination": self.destination.to_dict(),
            "transport_options": [t.to_dict() for t in self.transport_options],
            "activities": list(self.activities),
            "estimated_costs": self.estimated_costs.to_dict(),
        }


@dataclass
class TripPlan:
    destination: City
    transport_options: list[TransportOption]
    surprise: SurpriseTrip | None = None

    def to_dict(self) -> dict:
        return {
            "destination": self.destination.to_dict(),
            "transport_options": [t.to_dict() for t in self.transport_options],
            "surprise": self.surprise.to_dict() if self.surprise else None,
        }


@dataclass
class Attraction:
    name: str
    description: str
    image_url: str
    category: str
    rating: float
    estimated_time: str
    price: str

    def to_dict(self) -> dict:
        return asdict(self)
