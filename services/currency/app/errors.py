"""Domain errors raised by the conversion pipeline."""
from __future__ import annotations


class CurrencyError(Exception):
    """Base class; every subclass is rendered as ``{"error": message}``."""

    status_code: int = 400
    default_message: str = "Currency conversion failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CurrencyError):
    """Missing parameters or an unsupported target currency."""

    default_message = "Missing required parameters: 'from', 'to', or 'amount'."


class BadRequestError(CurrencyError):
    """Amount is present but not a positive number."""

    default_message = "Amount must be a positive number."


class ServiceUnavailableError(CurrencyError):
    """The rate provider could not be reached or answered with garbage."""

    default_message = "Failed to fetch exchange rates. Please try again later."


__all__ = [
    "CurrencyError",
    "ValidationError",
    "BadRequestError",
    "ServiceUnavailableError",
]
