"""Pydantic models for the currency service."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# Rates keyed by uppercase currency code, scoped to one base currency
RateTable = Dict[str, Decimal]


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    rate: Decimal
    amount: Decimal
    converted_amount: Decimal = Field(alias="convertedAmount")

    @field_serializer("rate", "amount", "converted_amount", when_used="json")
    def serialize_number(self, value: Decimal) -> float:
        return float(value)


class ErrorPayload(BaseModel):
    error: str
