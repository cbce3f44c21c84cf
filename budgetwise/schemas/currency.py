from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    amount: float = Field(ge=0)
    from_currency: str = Field(min_length=3, max_length=3)
    to_currency: str = Field(min_length=3, max_length=3)
