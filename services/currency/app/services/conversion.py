"""
Conversion pipeline: validate -> resolve rate -> convert -> assemble.

Each step runs only when the previous one succeeded; errors from the
validator and the resolver propagate untouched.
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Protocol

from ..errors import BadRequestError
from ..models import ConversionResult
from ..validator import parse_amount, validate_currency_inputs

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class RateResolver(Protocol):
    async def get_exchange_rate(self, from_ccy: str, to_ccy: str) -> Decimal:
        ...


def convert_currency(rate: Decimal, amount: Decimal) -> Decimal:
    """Apply ``rate`` to ``amount``, rounded half-up to two decimals."""
    rate = Decimal(rate)
    amount = Decimal(amount)
    with localcontext() as ctx:
        # Exact product, then enough digits to hold it at cent precision
        ctx.prec = max(ctx.prec, len(rate.as_tuple().digits) + len(amount.as_tuple().digits))
        product = rate * amount
        ctx.prec = max(ctx.prec, product.adjusted() + 3)
        return product.quantize(CENTS, rounding=ROUND_HALF_UP)


class CurrencyService:
    def __init__(self, resolver: RateResolver):
        self.resolver = resolver

    async def convert(self, from_ccy: Any, to_ccy: Any, amount: Any) -> ConversionResult:
        validate_currency_inputs(from_ccy, to_ccy, amount)
        value = parse_amount(amount)
        from_u = str(from_ccy).strip().upper()
        to_u = str(to_ccy).strip().upper()

        rate = await self.resolver.get_exchange_rate(from_u, to_u)
        converted = convert_currency(rate, value)
        if not math.isfinite(float(converted)):
            raise BadRequestError("Amount is too large to convert.")
        logger.info(f"Converted {value} {from_u} -> {converted} {to_u} at {rate}")

        return ConversionResult(
            from_=from_u,
            to=to_u,
            rate=rate,
            amount=value,
            converted_amount=converted,
        )
