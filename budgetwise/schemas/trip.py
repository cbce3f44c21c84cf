from datetime import date

from pydantic import BaseModel

from budgetwise.config import settings


class TripPlanRequest(BaseModel):
    """Planner form payload. Missing fields are reported with user-facing messages, not 422s."""
    budget: float | None = None
    from_city_id: str | None = None
    to_city_id: str | None = None
    departure_date: date | None = None
    currency: str = settings.default_currency
    is_return: bool = False
    surprise_mode: bool = False
    climate: str = "any"
