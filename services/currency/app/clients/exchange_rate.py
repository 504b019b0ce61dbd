"""
Rate resolver backed by exchangerate-api.com (v6 ``latest`` endpoint).

One GET per lookup, no retries and no caching. Every provider-side failure
is collapsed into ``ServiceUnavailableError`` so transport details never
reach the caller; the underlying cause is only logged.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ..errors import ServiceUnavailableError, ValidationError
from ..models import RateTable
from ..settings import ProviderConfig

logger = logging.getLogger(__name__)


class ExchangeRateClient:
    def __init__(self, config: ProviderConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    def latest_url(self, base: str) -> str:
        key = quote(self.config.api_key, safe="")
        return f"{self.config.base_url}/{key}/latest/{quote(base.upper(), safe='')}"

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout)) as client:
            return await client.get(url)

    @staticmethod
    def _to_rate(code: str, value: Any) -> Decimal:
        if isinstance(value, bool):
            raise ValueError(f"bad rate for {code}: {value!r}")
        try:
            rate = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"bad rate for {code}: {value!r}") from None
        if not rate.is_finite() or rate <= 0:
            raise ValueError(f"bad rate for {code}: {value!r}")
        return rate

    async def _fetch_conversion_rates(self, base_u: str) -> Dict[str, Any]:
        try:
            response = await self._get(self.latest_url(base_u))
            response.raise_for_status()
            payload = response.json()
            if not isinstance(payload, dict) or not isinstance(payload.get("conversion_rates"), dict):
                raise ValueError("conversion_rates missing")
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # ValueError also covers undecodable JSON bodies
            logger.warning(f"Rate provider failed for base {base_u}: {e.__class__.__name__}: {e}")
            raise ServiceUnavailableError() from e
        return {str(code).upper(): value for code, value in payload["conversion_rates"].items()}

    async def fetch_rate_table(self, base: str) -> RateTable:
        """Fetch every usable rate quoted against ``base``; unusable entries are skipped."""
        base_u = base.strip().upper()
        rates: RateTable = {}
        for code, value in (await self._fetch_conversion_rates(base_u)).items():
            try:
                rates[code] = self._to_rate(code, value)
            except ValueError as e:
                logger.debug(f"Skipping rate for base {base_u}: {e}")
        logger.debug(f"Fetched {len(rates)} rates for base {base_u}")
        return rates

    async def get_exchange_rate(self, from_ccy: str, to_ccy: str) -> Decimal:
        """Rate for converting one unit of ``from_ccy`` into ``to_ccy``."""
        base_u = from_ccy.strip().upper()
        target = to_ccy.strip().upper()
        raw = await self._fetch_conversion_rates(base_u)
        if target not in raw:
            raise ValidationError(f"Currency '{target}' is not supported.")
        try:
            rate = self._to_rate(target, raw[target])
        except ValueError as e:
            # Only the looked-up entry matters; others may be malformed
            logger.warning(f"Rate provider returned unusable rate for {base_u}/{target}: {e}")
            raise ServiceUnavailableError() from e
        logger.debug(f"Resolved {base_u}/{target} rate {rate}")
        return rate
