"""Test fixtures for clientip.

The core is pure and needs no fixtures; these build small FastAPI apps around
the client IP dependency for end-to-end tests over httpx's ASGI transport.
"""

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from clientip import ProxyConfig
from clientip.integrations.fastapi import create_client_ip_dep


def create_echo_app(config: ProxyConfig | None = None) -> FastAPI:
    """FastAPI app with a single endpoint returning the resolved client IP."""
    app = FastAPI()
    client_ip = create_client_ip_dep(config)

    @app.get("/ip")
    async def ip(address: str | None = Depends(client_ip)):
        return {"ip": address}

    return app


@pytest.fixture
def proxy_config() -> ProxyConfig:
    """Override per test module to change the app's trust settings."""
    return ProxyConfig(trust_proxy=True)


@pytest_asyncio.fixture
async def client(proxy_config: ProxyConfig):
    """Async HTTP client for the echo app. httpx connects as 127.0.0.1."""
    async with AsyncClient(
        transport=ASGITransport(app=create_echo_app(proxy_config)),
        base_url="http://test",
    ) as client:
        yield client
