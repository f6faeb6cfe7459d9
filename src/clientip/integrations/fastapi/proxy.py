"""Reverse proxy IP extraction for FastAPI requests."""

import logging
from ipaddress import ip_address

from fastapi import Request

from clientip.config import ProxyConfig
from clientip.resolver import get_client_ip

logger = logging.getLogger("clientip.integrations.fastapi")


def get_request_ip(request: Request, config: ProxyConfig) -> str | None:
    """Extract the real client IP, respecting proxy configuration.

    Resolution order:
    1. If neither trust_proxy nor trusted_proxy_networks is set → request.client.host.
    2. If trusted_proxy_networks is set → only read headers when the direct IP
       is in a trusted network (spoofing prevention).
    3. If trust_proxy is True (no networks) → always read headers.
    4. Headers are walked in ``CLIENT_IP_HEADERS`` order; no match → direct IP.
    """
    direct_ip = request.client.host if request.client is not None else None

    if not config.reads_headers:
        return direct_ip

    # Strict mode: only trust headers from known proxy IPs/CIDRs
    if config.trusted_proxy_networks:
        if direct_ip is None:
            return None
        try:
            addr = ip_address(direct_ip)
        except ValueError:
            logger.warning("Peer address %r is not an IP; ignoring proxy headers", direct_ip)
            return direct_ip
        if not any(addr in net for net in config.trusted_proxy_networks):
            logger.debug("Peer %s is not a trusted proxy; ignoring proxy headers", direct_ip)
            return direct_ip

    return get_client_ip(request.headers) or direct_ip
