import os

import pytest
from starlette.testclient import TestClient

# Settings are read at import time, so the env must be in place first
os.environ["EXCHANGE_RATE_API_KEY"] = "test-key"
os.environ["EXCHANGE_RATE_API_URL"] = "https://rates.test/v6"
os.environ["PROVIDER_ERROR_STATUS"] = "400"
os.environ.setdefault("CORS_ALLOW_ORIGINS", "")


@pytest.fixture(scope="session")
def app():
    from app.main import app as fastapi_app  # type: ignore
    return fastapi_app


@pytest.fixture()
def client(app):
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def provider_config():
    from app.settings import ProviderConfig  # type: ignore
    return ProviderConfig(base_url="https://rates.test/v6", api_key="test-key", timeout=5.0)


class StubResolver:
    """Records calls and answers from a fixed rate table."""

    def __init__(self, rates=None, error=None):
        self.rates = rates or {}
        self.error = error
        self.calls = []

    async def get_exchange_rate(self, from_ccy, to_ccy):
        from app.errors import ValidationError  # type: ignore

        self.calls.append((from_ccy, to_ccy))
        if self.error is not None:
            raise self.error
        if to_ccy not in self.rates:
            raise ValidationError(f"Currency '{to_ccy}' is not supported.")
        return self.rates[to_ccy]


@pytest.fixture()
def stub_resolver():
    return StubResolver
