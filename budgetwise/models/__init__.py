from budgetwise.models.travel import (
    Attraction,
    BudgetBreakdown,
    City,
    CostTier,
    DestinationEstimate,
    Recommendation,
    SurpriseTrip,
    TransportMode,
    TransportOption,
    TripPlan,
)

__all__ = [
    "Attraction",
    "BudgetBreakdown",
    "City",
    "CostTier",
    "DestinationEstimate",
    "Recommendation",
    "SurpriseTrip",
    "TransportMode",
    "TransportOption",
    "TripPlan",
]
