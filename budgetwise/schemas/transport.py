from datetime import date

from pydantic import BaseModel, Field

from budgetwise.config import settings


class TransportSearchRequest(BaseModel):
    from_city_id: str
    to_city_id: str
    departure_date: date
    budget: float = Field(gt=0)
    currency: str = Field(settings.default_currency, min_length=3, max_length=3)
