"""Presence and amount checks run before any provider call."""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import BadRequestError, ValidationError


def _is_missing(value: Any) -> bool:
    # Only None and blank strings count as missing; numeric 0 is checked later
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_amount(amount: Any) -> Decimal:
    """Parse ``amount`` into a finite, strictly positive Decimal."""
    if isinstance(amount, bool):
        raise BadRequestError()
    # Digit grouping such as "1_000" is not a plain number
    if isinstance(amount, str) and "_" in amount:
        raise BadRequestError()
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise BadRequestError() from None
    if not value.is_finite() or value <= 0:
        raise BadRequestError()
    # Amounts must fit a double, like any JSON number
    if not math.isfinite(float(value)):
        raise BadRequestError()
    return value


def validate_currency_inputs(from_ccy: Any, to_ccy: Any, amount: Any) -> None:
    if _is_missing(from_ccy) or _is_missing(to_ccy) or _is_missing(amount):
        raise ValidationError()
    parse_amount(amount)


__all__ = ["parse_amount", "validate_currency_inputs"]
