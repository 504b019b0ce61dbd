from .exchange_rate import ExchangeRateClient

__all__ = ["ExchangeRateClient"]
