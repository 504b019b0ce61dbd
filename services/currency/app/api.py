from typing import Optional

from fastapi import APIRouter, Depends, Query

from .clients import ExchangeRateClient
from .models import ConversionResult, ErrorPayload
from .services import CurrencyService
from .settings import ProviderConfig, get_settings

router = APIRouter(prefix="/currency", tags=["currency"])


def get_currency_service() -> CurrencyService:
    config = ProviderConfig.from_settings(get_settings())
    return CurrencyService(ExchangeRateClient(config))


@router.get(
    "/convert",
    response_model=ConversionResult,
    response_model_by_alias=True,
    responses={400: {"model": ErrorPayload}},
)
async def convert(
    from_ccy: Optional[str] = Query(None, alias="from", description="Base currency, e.g. USD"),
    to_ccy: Optional[str] = Query(None, alias="to", description="Target currency, e.g. EUR"),
    amount: Optional[str] = Query(None, description="Positive amount in the base currency"),
    service: CurrencyService = Depends(get_currency_service),
):
    """
    Convert ``amount`` from one currency to another at the latest provider rate.

    Example: /currency/convert?from=USD&to=EUR&amount=100
    """
    return await service.convert(from_ccy, to_ccy, amount)
