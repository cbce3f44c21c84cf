"""Domain exceptions — every failure the API can surface to a user."""


class BudgetWiseError(Exception):
    """Base class for all BudgetWise errors."""


class TripValidationError(BudgetWiseError):
    """A plan request is missing something the user must supply."""


class CityNotFoundError(BudgetWiseError):
    def __init__(self, city_id: str):
        super().__init__(f"Unknown city: {city_id}")
        self.city_id = city_id


class ExchangeRateError(BudgetWiseError):
    """The exchange-rate source failed or returned an unusable body."""


class UnsupportedCurrencyError(BudgetWiseError, KeyError):
    def __init__(self, currency: str):
        super().__init__(f"No exchange rate for currency: {currency}")
        self.currency = currency

    def __str__(self) -> str:
        return self.args[0]


class NoTransportAvailableError(BudgetWiseError):
    """No transport option fits the budget for the requested route."""
