"""Client IP resolution — walk a fixed list of proxy/CDN headers, first valid IP wins.

Framework-agnostic. Takes any case-insensitive header mapping and returns the
address string or None. None is a normal outcome (e.g. a direct connection);
callers decide whether to fall back to the socket peer address.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from clientip.forwarded import get_client_ip_from_x_forwarded_for
from clientip.validators import is_ip

logger = logging.getLogger("clientip.resolver")


@runtime_checkable
class HeaderSource(Protocol):
    """Read-only, case-insensitive header lookup.

    Starlette/FastAPI ``Headers``, werkzeug ``Headers`` and requests'
    ``CaseInsensitiveDict`` all satisfy it. Plain dicts are accepted by
    ``get_client_ip`` and lower-cased first.
    """

    def get(self, name: str, default: Any = None) -> Any:
        ...


def _ip_if_valid(value: Any) -> str | None:
    return value if is_ip(value) else None


# Evaluated top to bottom; the first header holding a valid IP wins.
CLIENT_IP_HEADERS: tuple[tuple[str, Callable[[Any], str | None]], ...] = (
    # Standard header used by Amazon EC2, Heroku and others.
    ("x-client-ip", _ip_if_valid),
    # Load balancers (AWS ELB) and proxies. May hold a chain of hops.
    ("x-forwarded-for", get_client_ip_from_x_forwarded_for),
    # Cloudflare, applied to every request to the origin.
    ("cf-connecting-ip", _ip_if_valid),
    # DigitalOcean App Platform.
    ("do-connecting-ip", _ip_if_valid),
    # Fastly, and Firebase hosting when forwarding to a cloud function.
    ("fastly-client-ip", _ip_if_valid),
    # Akamai and Cloudflare.
    ("true-client-ip", _ip_if_valid),
    # Default nginx proxy/fcgi.
    ("x-real-ip", _ip_if_valid),
    # Rackspace LB and Riverbed Stingray.
    ("x-cluster-client-ip", _ip_if_valid),
    ("x-forwarded", _ip_if_valid),
    ("forwarded-for", _ip_if_valid),
    ("forwarded", _ip_if_valid),
    # Google App Engine.
    ("x-appengine-user-ip", _ip_if_valid),
    # Cloudflare pseudo IPv4 fallback for IPv6-only clients.
    ("cf-pseudo-ipv4", _ip_if_valid),
)


def get_client_ip(headers: HeaderSource | dict | None) -> str | None:
    """Determine the originating client IP from request headers.

    Returns the first valid IP found in ``CLIENT_IP_HEADERS`` order, or None.

    Raises:
        InvalidInputType: If the ``x-forwarded-for`` value is not a string.
    """
    if headers is None:
        return None

    if isinstance(headers, dict):
        headers = {str(name).lower(): value for name, value in headers.items()}

    for name, extract in CLIENT_IP_HEADERS:
        ip = extract(headers.get(name))
        if ip is not None:
            logger.debug("Client IP %s resolved from %s header", ip, name)
            return ip

    logger.debug("No client IP found in request headers")
    return None
