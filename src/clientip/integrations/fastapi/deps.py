"""FastAPI dependencies — factory functions bound to a ProxyConfig."""

from fastapi import Request

from clientip.config import ProxyConfig
from clientip.integrations.fastapi.proxy import get_request_ip


def create_client_ip_dep(config: ProxyConfig | None = None):
    """Create a FastAPI dependency that yields the caller's IP (or None).

    Usage:
        client_ip = create_client_ip_dep(ProxyConfig(trust_proxy=True))

        @app.get("/whoami")
        async def whoami(ip: str | None = Depends(client_ip)):
            return {"ip": ip}
    """
    config = config or ProxyConfig()

    async def client_ip(request: Request) -> str | None:
        return get_request_ip(request, config)

    return client_ip
