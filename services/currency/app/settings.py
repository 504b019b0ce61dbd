"""Application settings for the currency service."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    APP_NAME: str = "currency"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Upstream rate provider (exchangerate-api.com v6)
    EXCHANGE_RATE_API_URL: str = "https://v6.exchangerate-api.com/v6"
    # NOTE: not validated here; a missing key surfaces as a provider failure
    EXCHANGE_RATE_API_KEY: str = ""
    # None disables the transport timeout entirely
    HTTP_TIMEOUT_SEC: Optional[float] = 10.0

    # Status returned for provider failures (400 keeps the historical contract)
    PROVIDER_ERROR_STATUS: int = 400

    # CORS (CSV list, e.g. "https://app.example.com,https://foo.bar")
    CORS_ALLOW_ORIGINS: Optional[str] = None
    CORS_ALLOW_ORIGIN_REGEX: Optional[str] = None
    CORS_ALLOW_CREDENTIALS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_origin_list(self) -> List[str]:
        if not self.CORS_ALLOW_ORIGINS:
            return []
        return [s.strip() for s in str(self.CORS_ALLOW_ORIGINS).split(",") if s.strip()]


@dataclass(frozen=True)
class ProviderConfig:
    """Connection details for the exchange-rate provider."""

    base_url: str
    api_key: str
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderConfig":
        return cls(
            base_url=settings.EXCHANGE_RATE_API_URL.rstrip("/"),
            api_key=settings.EXCHANGE_RATE_API_KEY.strip(),
            timeout=settings.HTTP_TIMEOUT_SEC,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
