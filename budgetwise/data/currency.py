"""Currency utilities — supported currencies, conversion and display."""

from budgetwise.exceptions import UnsupportedCurrencyError

# Currencies offered to travellers, in display order
SUPPORTED_CURRENCIES: dict[str, str] = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "INR": "Indian Rupee",
    "CNY": "Chinese Yuan",
    "SGD": "Singapore Dollar",
    "AED": "UAE Dirham",
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "CAD": "CA$", "GBP": "£", "EUR": "€",
    "JPY": "¥", "AUD": "A$", "SGD": "S$", "HKD": "HK$",
    "INR": "₹", "AED": "AED", "CNY": "CN¥", "TRY": "TRY",
    "KRW": "₩", "THB": "฿",
}


def convert_currency(
    amount: float,
    from_currency: str,
    to_currency: str,
    rates: dict[str, float],
) -> float:
    """Convert an amount between currencies using USD-based rates."""
    if from_currency == to_currency:
        return amount

    def _rate(code: str) -> float:
        if code not in rates:
            raise UnsupportedCurrencyError(code)
        return rates[code]

    amount_in_usd = amount if from_currency == "USD" else amount / _rate(from_currency)
    converted = amount_in_usd if to_currency == "USD" else amount_in_usd * _rate(to_currency)
    return round(converted, 2)


def format_price(amount: float, currency: str = "USD") -> str:
    """Format a price with currency symbol for display."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{round(amount):,}"
