from .conversion import CurrencyService, convert_currency

__all__ = ["CurrencyService", "convert_currency"]
