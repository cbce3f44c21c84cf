from pydantic import BaseModel, Field

from budgetwise.config import settings


class BudgetRecommendationRequest(BaseModel):
    from_city_id: str
    budget: float = Field(gt=0)
    days: int = Field(settings.default_trip_days, ge=1, le=90)
    max_flight_budget: float | None = Field(None, gt=0)
    preferred_regions: list[str] = []
    excluded_cities: list[str] = []


class DestinationEstimateRequest(BaseModel):
    budget: float = Field(gt=0)
    from_city_id: str | None = None
    preferences: list[str] = []
    duration: int = Field(settings.default_trip_days, ge=1, le=90)
