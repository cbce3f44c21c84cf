"""Currency router — live exchange rates and conversion."""

from fastapi import APIRouter, Depends, HTTPException, Query

from budgetwise.data.currency import SUPPORTED_CURRENCIES, convert_currency, format_price
from budgetwise.dependencies import get_exchange_rates
from budgetwise.exceptions import ExchangeRateError, UnsupportedCurrencyError
from budgetwise.schemas.currency import ConvertRequest
from budgetwise.services.exchange_rate_service import ExchangeRateService

router = APIRouter()

RATES_UNAVAILABLE = "Failed to load exchange rates. Please try again later."


@router.get("/supported")
async def supported_currencies():
    return [{"code": code, "name": name} for code, name in SUPPORTED_CURRENCIES.items()]


@router.get("/rates")
async def get_rates(
    base: str = Query("USD", min_length=3, max_length=3),
    service: ExchangeRateService = Depends(get_exchange_rates),
):
    try:
        rates = await service.get_exchange_rates(base.upper())
    except ExchangeRateError:
        raise HTTPException(status_code=503, detail=RATES_UNAVAILABLE)
    return {"base": base.upper(), "rates": rates}


@router.post("/convert")
async def convert(
    req: ConvertRequest,
    service: ExchangeRateService = Depends(get_exchange_rates),
):
    """Convert using USD-based rates."""
    try:
        rates = await service.get_exchange_rates("USD")
    except ExchangeRateError:
        raise HTTPException(status_code=503, detail=RATES_UNAVAILABLE)

    from_currency = req.from_currency.upper()
    to_currency = req.to_currency.upper()
    try:
        amount = convert_currency(req.amount, from_currency, to_currency, rates)
    except UnsupportedCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "amount": amount,
        "currency": to_currency,
        "formatted": format_price(amount, to_currency),
    }
